import time

from context_engine.core import logging
from context_engine.core.error_handling import PipelineError
from context_engine.core.protocols import PipelineStep
from context_engine.core.types import PipelineContext, PipelineResult, PipelineStats


class PipelineValidator:
    """Dedicated validator for pipeline configurations"""

    @staticmethod
    def validate_steps(steps: list[PipelineStep]) -> None:
        """Validate that steps are usable and uniquely named"""
        if not steps:
            raise ValueError("Pipeline must contain at least one step")

        seen: set[str] = set()
        for step in steps:
            if not isinstance(step, PipelineStep):
                raise ValueError(
                    f"{step.__class__.__name__} does not implement PipelineStep"
                )
            if step.name in seen:
                raise ValueError(f"Duplicate pipeline step name: {step.name}")
            seen.add(step.name)


class Pipeline:
    """Manages execution of multiple pipeline steps in sequence"""

    def __init__(self, steps: list[PipelineStep]):
        self.steps = steps
        self.validator = PipelineValidator()
        self.validator.validate_steps(steps)

    async def execute(self, initial_context: PipelineContext) -> PipelineResult:
        """Execute steps in sequence, stopping early if a step aborts"""
        started = time.perf_counter()
        executed: list[str] = []

        current = initial_context
        for step in self.steps:
            if current.is_aborted:
                logging.info(
                    f"Pipeline aborted before {step.name}: {current.abort_reason}"
                )
                break
            try:
                current = await step.process(current)
            except Exception as e:
                raise PipelineError(step.name, e) from e
            executed.append(step.name)

        return PipelineResult(
            messages=current.messages,
            metadata=current.metadata,
            is_aborted=current.is_aborted,
            abort_reason=current.abort_reason,
            stats=PipelineStats(
                executed_processors=executed,
                processing_time_ms=(time.perf_counter() - started) * 1000,
            ),
        )
