import time
from typing import Optional

from context_engine.core.error_handling import log_exception
from context_engine.core.logging import get_logger
from context_engine.core.protocols import PipelineStep
from context_engine.core.types import PipelineContext, ProcessorOptions

EXECUTED_PROCESSORS_KEY = "executed_processors"


class BaseProcessor(PipelineStep):
    """
    Base class for pipeline processors.

    Subclasses implement ``do_process``. ``process`` guarantees the caller's
    context is never handed back mutated, that the processor is recorded as
    executed, and that failures inside ``do_process`` degrade to an unchanged
    (but marked) context instead of propagating.
    """

    name: str = "BaseProcessor"

    def __init__(self, options: Optional[ProcessorOptions] = None):
        self.options = options or ProcessorOptions()
        self.log = get_logger(f"processor.{self.name}")

    async def process(self, context: PipelineContext) -> PipelineContext:
        started = time.perf_counter()
        try:
            result = await self.do_process(context)
        except Exception as e:
            log_exception(
                f"{self.name} failed, passing context through unchanged",
                e,
                logger=self.log,
                processor=self.name,
            )
            return self.mark_as_executed(self.clone_context(context))

        if self.options.debug:
            self.log.debug(
                f"{self.name} finished in {(time.perf_counter() - started) * 1000:.2f}ms"
            )
        return result

    async def do_process(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

    def clone_context(self, context: PipelineContext) -> PipelineContext:
        # Messages are immutable, so only the containers need copying.
        return context.model_copy(
            update={
                "messages": list(context.messages),
                "metadata": dict(context.metadata),
            }
        )

    def mark_as_executed(self, context: PipelineContext) -> PipelineContext:
        executed = [*context.metadata.get(EXECUTED_PROCESSORS_KEY, []), self.name]
        return context.model_copy(
            update={"metadata": {**context.metadata, EXECUTED_PROCESSORS_KEY: executed}}
        )

    def abort(self, context: PipelineContext, reason: str) -> PipelineContext:
        self.log.info(f"{self.name} aborted the pipeline: {reason}")
        return self.clone_context(context).model_copy(
            update={"is_aborted": True, "abort_reason": reason}
        )
