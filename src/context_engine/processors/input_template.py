from typing import Optional

from context_engine.core.base import BaseProcessor
from context_engine.core.protocols import TemplateCompiler
from context_engine.core.templating import TEXT_INTERPOLATE_PATTERN, compile_template
from context_engine.core.types import (
    InputTemplateConfig,
    PipelineContext,
    ProcessorOptions,
    Role,
)

PROCESSED_COUNT_KEY = "input_template_processed"


class InputTemplateProcessor(BaseProcessor):
    """Applies the configured input template to the last user message."""

    name = "InputTemplateProcessor"

    def __init__(
        self,
        config: InputTemplateConfig,
        options: Optional[ProcessorOptions] = None,
        compiler: TemplateCompiler = compile_template,
    ):
        super().__init__(options)
        self.config = config
        self._compiler = compiler

    async def do_process(self, context: PipelineContext) -> PipelineContext:
        cloned = self.clone_context(context)
        template = self.config.input_template
        processed_count = 0

        if not template:
            self.log.info("No input template configured, skipping processing")
        else:
            try:
                compiled = self._compiler(template, TEXT_INTERPOLATE_PATTERN)
            except Exception as e:
                self.log.error(f"Template compilation failed: {e}")
            else:
                self.log.info(f"Applying input template: {template}")
                processed_count = self._apply_to_last_user_message(cloned, compiled)

        cloned.metadata[PROCESSED_COUNT_KEY] = processed_count
        self.log.info(
            f"Input template processing completed, processed {processed_count} messages"
        )

        return self.mark_as_executed(cloned)

    def _apply_to_last_user_message(self, context: PipelineContext, compiled) -> int:
        # Only the latest user turn is rewritten; earlier turns are history.
        index = next(
            (
                i
                for i in range(len(context.messages) - 1, -1, -1)
                if context.messages[i].role == Role.USER
            ),
            None,
        )
        if index is None:
            return 0

        message = context.messages[index]
        if not message.is_text:
            self.log.info(f"Skip input template for non-string content message {message.id}")
            return 0

        try:
            rendered = compiled({"text": message.content})
        except Exception as e:
            self.log.error(f"Error applying template to message {message.id}: {e}")
            return 0

        if rendered == message.content:
            return 0

        context.messages[index] = message.model_copy(update={"content": rendered})
        self.log.info(f"Applied template to last user message {message.id}")
        return 1
