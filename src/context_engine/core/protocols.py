from typing import Any, Mapping, Protocol, runtime_checkable

from context_engine.core.types import InputTemplateConfig, PipelineContext


@runtime_checkable
class PipelineStep(Protocol):
    """Protocol defining what a pipeline step must implement"""

    name: str

    async def process(self, context: PipelineContext) -> PipelineContext: ...


@runtime_checkable
class CompiledTemplate(Protocol):
    """A template ready to be rendered with a set of bindings"""

    def __call__(self, bindings: Mapping[str, Any]) -> str: ...


class TemplateCompiler(Protocol):
    """Defines the contract for turning a template string into a renderer."""

    def __call__(self, template: str, pattern: str) -> CompiledTemplate: ...


class ConfigProvider(Protocol):
    """Defines the contract for how the engine gets processor configurations."""

    def get_processors(self) -> dict[str, Any]: ...
    def get_input_template_config(self) -> InputTemplateConfig: ...
