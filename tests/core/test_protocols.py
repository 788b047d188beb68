from context_engine.core import BaseProcessor, PipelineStep, TemplateCompiler
from context_engine.core.protocols import CompiledTemplate
from context_engine.core.templating import compile_template
from context_engine.processors import InputTemplateProcessor
from context_engine.core.types import InputTemplateConfig, PipelineContext


class MockPipelineStep:
    """Minimal step satisfying the protocol without inheriting from it"""

    name = "MockPipelineStep"

    async def process(self, context: PipelineContext) -> PipelineContext:
        return context


# Protocol Conformance Tests
def test_pipeline_step_protocol_conformance():
    """Test that our implementations properly satisfy the PipelineStep protocol"""
    assert isinstance(MockPipelineStep(), PipelineStep)
    assert isinstance(InputTemplateProcessor(InputTemplateConfig()), PipelineStep)


def test_base_processor_is_a_pipeline_step():
    assert isinstance(BaseProcessor(), PipelineStep)


def test_object_without_process_is_not_a_step():
    class NotAStep:
        name = "NotAStep"

    assert not isinstance(NotAStep(), PipelineStep)


def test_compiler_protocol_conformance():
    """Test that the default compiler returns a CompiledTemplate"""
    compiler: TemplateCompiler = compile_template
    compiled = compiler("{{ text }}", r"{{\s*(text)\s*}}")
    assert isinstance(compiled, CompiledTemplate)
    assert callable(compiled)
