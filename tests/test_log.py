"""
Logging tests

Tests verbosity gating in LOG() and the document tag carried on each record.
"""

from pathlib import Path

import pytest
from loguru import logger

from mdpost.lib.log import LOG, NO_DOCUMENT, state_connectToLogger
from mdpost.lib.postprocessors import TagFilter
from mdpost.lib.runner import postprocessors_run
from mdpost.models.context import Context
from mdpost.models.state import RunState


@pytest.fixture
def records():
    """Collect loguru records emitted during the test"""
    captured = []
    handler_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    yield captured
    logger.remove(handler_id)
    state_connectToLogger(None)


class TestVerbosity:
    """Test LOG() verbosity gating"""

    def test_below_level_suppressed(self, records):
        state_connectToLogger(RunState(verbosity=1))
        LOG("trace detail", level=3)

        assert records == []

    def test_at_level_emitted(self, records):
        state_connectToLogger(RunState(verbosity=2))
        LOG("summary", level=2)

        assert [r["message"] for r in records] == ["summary"]

    def test_no_state_silent(self, records):
        """Without a connected RunState nothing is logged"""
        state_connectToLogger(None)
        LOG("anything", level=0)

        assert records == []


class TestDocumentTag:
    """Test that records name the document being processed"""

    def test_default_document(self, records):
        """Outside a chain run the document column is a placeholder"""
        state_connectToLogger(RunState(verbosity=3))
        LOG("idle", level=1)

        assert records[0]["extra"]["document"] == NO_DOCUMENT

    def test_destination_tagged_during_run(self, records):
        """Records emitted by a chain carry the context destination"""
        state = RunState(verbosity=3)
        state_connectToLogger(state)
        context = Context(frontmatter={"tags": ["private"]}, destination=Path("out/secret.md"))

        postprocessors_run(context, [], [TagFilter(skip_tags=frozenset({"private"}))], state)

        assert records
        assert {r["extra"]["document"] for r in records} == {str(Path("out/secret.md"))}
        assert state.document is None

    def test_caller_location(self, records):
        """Records point at the caller of LOG(), not at LOG() itself"""
        state_connectToLogger(RunState(verbosity=1))
        LOG("here", level=1)

        assert records[0]["function"] == "test_caller_location"
