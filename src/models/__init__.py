"""
Models package for mdpost

Contains the event model, document context and control signals, rewrite
decisions and run state used by the postprocessors.
"""

from .events import Event, EventKind, EventSequence, Tag, TagKind
from .context import Context, FrontmatterError, PostprocessorResult
from .rewrite import Action, CommentState, Decision
from .state import RunState

__all__ = [
    "Event",
    "EventKind",
    "EventSequence",
    "Tag",
    "TagKind",
    "Context",
    "FrontmatterError",
    "PostprocessorResult",
    "Action",
    "CommentState",
    "Decision",
    "RunState",
]
