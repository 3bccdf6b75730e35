"""
Loguru logging gated by the verbosity of the current ProgramState.

The CLI pipeline connects its state once with state_connectToLogger(); after
that LOG() calls in the formatter and CLI stages print only when
the state verbosity reaches the requested level:

    1  stage headlines (default)
    2  paths, character and directive counts (-v)
    3  token dump and per-token formatter decisions (-vv)
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
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """Make the state verbosity available to LOG() in this context"""
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """Log message at debug level if the connected state verbosity >= level"""
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.debug(message, **kwargs)
