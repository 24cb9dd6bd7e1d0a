"""
mdpost - Markdown event-stream postprocessors

Strips %%comments%%, elides table-of-contents directive blocks, filters
documents by frontmatter tags and normalizes line breaks on a parsed
markdown event stream.
"""

__version__ = "1.0.0"

from .lib import (
    TagFilter,
    tagFilter_make,
    softbreaks_toHardbreaks,
    toc_remove,
    comments_remove,
    PostprocessorError,
    postprocessors_run,
    postprocessors_fromSettings,
    LOG,
    state_connectToLogger,
)
from .models import Context, Event, EventKind, PostprocessorResult, RunState, Tag, TagKind

__all__ = [
    "TagFilter",
    "tagFilter_make",
    "softbreaks_toHardbreaks",
    "toc_remove",
    "comments_remove",
    "PostprocessorError",
    "postprocessors_run",
    "postprocessors_fromSettings",
    "LOG",
    "state_connectToLogger",
    "Context",
    "Event",
    "EventKind",
    "PostprocessorResult",
    "RunState",
    "Tag",
    "TagKind",
    "__version__",
]
