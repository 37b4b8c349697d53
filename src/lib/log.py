"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of the ProgramState connected to the current
context, so the tokenizer and codecs can trace their work without being
handed the state. Library callers that never connect a state get no output.

Usage:
    from macrotags.lib.log import LOG, state_connectToLogger

    # At start of a pipeline stage:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Converted 3 files", level=1)
    LOG("Converting pages/home.html", level=2)
    LOG("Found macro 'weather' at position 6", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <10}</cyan>:<cyan>{function: <18}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: Object with a verbosity attribute (normally ProgramState)
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Summaries (default)
        2 = Per-file progress (-v)
        3 = Scanner and codec traces (-vv or higher)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        # depth=1 attributes the record to the caller, not to LOG()
        logger.opt(depth=1).debug(message, **kwargs)
