import logging

import pytest

from context_engine.core.base import EXECUTED_PROCESSORS_KEY, BaseProcessor
from context_engine.core.types import Message, PipelineContext, ProcessorOptions, Role


class FailingProcessor(BaseProcessor):
    name = "FailingProcessor"

    async def do_process(self, context: PipelineContext) -> PipelineContext:
        cloned = self.clone_context(context)
        cloned.metadata["half_done"] = True
        raise RuntimeError("internal failure")


class NoopProcessor(BaseProcessor):
    name = "NoopProcessor"

    async def do_process(self, context: PipelineContext) -> PipelineContext:
        return self.mark_as_executed(self.clone_context(context))


@pytest.fixture
def context():
    return PipelineContext(
        messages=[
            Message(id="s1", role=Role.SYSTEM, content="be nice"),
            Message(id="u1", role=Role.USER, content="hello"),
        ],
        metadata={"existing": 1, EXECUTED_PROCESSORS_KEY: ["Earlier"]},
    )


def test_clone_context_copies_containers_but_shares_messages(context):
    processor = NoopProcessor()

    cloned = processor.clone_context(context)

    assert cloned is not context
    assert cloned.messages is not context.messages
    assert cloned.metadata is not context.metadata
    assert cloned.messages[0] is context.messages[0]
    cloned.metadata["new"] = True
    cloned.messages.pop()
    assert "new" not in context.metadata
    assert len(context.messages) == 2


def test_mark_as_executed_appends_without_mutating_input(context):
    processor = NoopProcessor()

    marked = processor.mark_as_executed(context)

    assert marked.metadata[EXECUTED_PROCESSORS_KEY] == ["Earlier", "NoopProcessor"]
    assert context.metadata[EXECUTED_PROCESSORS_KEY] == ["Earlier"]


@pytest.mark.asyncio
async def test_failures_do_not_escape_process(context, caplog):
    processor = FailingProcessor()

    with caplog.at_level(logging.ERROR, logger="context_engine"):
        result = await processor.process(context)

    assert result.messages == context.messages
    assert "half_done" not in result.metadata
    assert result.metadata[EXECUTED_PROCESSORS_KEY] == ["Earlier", "FailingProcessor"]
    assert context.metadata[EXECUTED_PROCESSORS_KEY] == ["Earlier"]
    assert any("internal failure" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_debug_option_logs_timing(context, caplog):
    processor = NoopProcessor(ProcessorOptions(debug=True))

    with caplog.at_level(logging.DEBUG, logger="context_engine"):
        await processor.process(context)

    assert any("NoopProcessor finished in" in r.getMessage() for r in caplog.records)


def test_abort_sets_reason_on_a_copy(context):
    processor = NoopProcessor()

    aborted = processor.abort(context, "no budget")

    assert aborted.is_aborted is True
    assert aborted.abort_reason == "no budget"
    assert context.is_aborted is False


def test_messages_are_immutable(context):
    with pytest.raises(Exception):
        context.messages[1].content = "changed"


def test_clone_context_leaves_no_shared_mutable_fields(context):
    processor = NoopProcessor()

    cloned = processor.clone_context(context)

    assert set(PipelineContext.model_fields) == {
        "messages",
        "metadata",
        "is_aborted",
        "abort_reason",
    }
    for field in ("messages", "metadata"):
        assert getattr(cloned, field) is not getattr(context, field)
