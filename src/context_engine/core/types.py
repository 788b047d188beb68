from enum import Enum
from typing import Any, Optional, Union

import pydantic


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    TOOL = "tool"


class ContentPart(pydantic.BaseModel):
    """One element of a multimodal message body"""

    type: str = "text"
    text: Optional[str] = None
    image_url: Optional[str] = None


class Message(pydantic.BaseModel):
    """A single conversation turn. Replace it, never edit it."""

    model_config = pydantic.ConfigDict(frozen=True)

    id: str
    role: Role
    content: Union[str, list[ContentPart]]

    @property
    def is_text(self) -> bool:
        return isinstance(self.content, str)


class ProcessorOptions(pydantic.BaseModel):
    debug: bool = False


class PipelineContext(pydantic.BaseModel):
    """Container for conversation state passing through pipeline steps"""

    messages: list[Message] = []
    metadata: dict[str, Any] = {}
    is_aborted: bool = False
    abort_reason: Optional[str] = None


class InputTemplateConfig(pydantic.BaseModel):
    """Configuration for the input template processor"""

    model_config = pydantic.ConfigDict(populate_by_name=True)

    input_template: Optional[str] = pydantic.Field(default=None, alias="inputTemplate")


class PipelineStats(pydantic.BaseModel):
    executed_processors: list[str] = []
    processing_time_ms: float = 0.0


class PipelineResult(pydantic.BaseModel):
    """Final output of a pipeline run"""

    messages: list[Message]
    metadata: dict[str, Any] = {}
    is_aborted: bool = False
    abort_reason: Optional[str] = None
    stats: PipelineStats = pydantic.Field(default_factory=PipelineStats)
