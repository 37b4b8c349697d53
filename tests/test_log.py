"""
Logging tests - LOG() follows the verbosity of the connected ProgramState
"""

import pytest
from loguru import logger

from macrotags.lib.log import LOG, state_connectToLogger
from macrotags.lib.tokenizer import events_collect
from macrotags.models import ProgramState


@pytest.fixture
def messages():
    """Collect loguru messages in a list while the test runs"""
    collected = []
    sink_id = logger.add(lambda message: collected.append(message.record["message"]),
                         format="{message}", level="DEBUG")
    yield collected
    logger.remove(sink_id)
    state_connectToLogger(None)


class TestContextVerbosity:
    """LOG() output depends on the state in the current context"""

    def test_no_state_is_silent(self, messages):
        """Without a connected state nothing is logged"""
        state_connectToLogger(None)
        LOG("hidden", level=1)
        assert messages == []

    def test_level_gating(self, messages):
        """Messages above the state's verbosity are dropped"""
        state_connectToLogger(ProgramState(verbosity=2))

        LOG("summary", level=1)
        LOG("progress", level=2)
        LOG("trace", level=3)

        assert messages == ["summary", "progress"]

    def test_tokenizer_traces_at_verbosity_3(self, messages):
        """The scanner reports each macro it finds when tracing"""
        state_connectToLogger(ProgramState(verbosity=3))

        events_collect('Hi <?UMBRACO_MACRO macroAlias="x"><img></?UMBRACO_MACRO>')

        assert any("Found macro 'x'" in m for m in messages)
        assert any("Dropping children" in m for m in messages)

    def test_tokenizer_quiet_at_default_verbosity(self, messages):
        """Scanner traces are hidden at normal verbosity"""
        state_connectToLogger(ProgramState(verbosity=1))

        events_collect('<?UMBRACO_MACRO macroAlias="x" />')

        assert messages == []
