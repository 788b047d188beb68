import logging
import traceback
import uuid
from typing import Any, Optional

from context_engine.core import logging as engine_logging


class ContextEngineError(Exception):
    """Base class for errors raised by the context engine"""


class TemplateError(ContextEngineError):
    """Raised by the templating compiler"""


class TemplateCompileError(TemplateError):
    """The template string or interpolation pattern could not be compiled"""


class TemplateRenderError(TemplateError):
    """A compiled template failed while being rendered"""


class PipelineError(ContextEngineError):
    """A pipeline step raised instead of returning a context"""

    def __init__(self, step_name: str, cause: BaseException):
        super().__init__(f"Pipeline step {step_name} failed: {cause}")
        self.step_name = step_name
        self.cause = cause


def log_exception(
    msg: str,
    exc: BaseException,
    logger: Optional[logging.Logger] = None,
    **context: Any,
) -> str:
    """Log an exception with a correlation id and return that id."""
    error_id = str(uuid.uuid4())
    target = logger or engine_logging.logger

    target.error(
        f"{msg} ({error_id}): {exc}",
        extra={
            "error_id": error_id,
            **context,
            "error_type": exc.__class__.__name__,
            "traceback": "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            ),
        },
    )
    return error_id
