"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of the RunState connected to the current context
and tags each record with the document that state is processing, so output
from many documents stays attributable without threading a name through
every postprocessor call.

Usage:
    from mdpost.lib.log import LOG, state_connectToLogger

    # Once per run (or per worker):
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Shown if verbosity >= 1", level=1)
    LOG("Per-document summary if verbosity >= 2", level=2)
    LOG("Per-event trace if verbosity >= 3", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

NO_DOCUMENT = "-"

# RunState for the current run; None silences LOG()
_run_state: ContextVar[Optional[Any]] = ContextVar('run_state', default=None)

# Document column comes from the record's `document` extra
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<magenta>{extra[document]: <24}</magenta> │ "
    "<cyan>{function}:{line}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.configure(extra={"document": NO_DOCUMENT})
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a RunState to the logging context.

    Args:
        state: RunState instance, or None to silence LOG() in this context
    """
    _run_state.set(state)


def document_get() -> str:
    """Name of the document the connected RunState is processing"""
    state = _run_state.get()
    document = getattr(state, 'document', None)
    return document or NO_DOCUMENT


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata
    """
    state = _run_state.get()

    if state is None or getattr(state, 'verbosity', 0) < level:
        return

    # depth=1 so {function}/{line} point at the caller, not at LOG()
    logger.bind(document=document_get()).opt(depth=1).debug(message, **kwargs)
