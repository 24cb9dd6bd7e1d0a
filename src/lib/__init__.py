"""
mdpost - Markdown event-stream postprocessors

Composable passes applied to a parsed markdown event stream before rendering.
"""

__version__ = "1.0.0"

from .postprocessors import (
    Postprocessor,
    TagFilter,
    tagFilter_make,
    softbreaks_toHardbreaks,
    toc_remove,
    comments_remove,
)
from .runner import PostprocessorError, postprocessors_run, postprocessors_fromSettings
from .log import LOG, state_connectToLogger

__all__ = [
    "Postprocessor",
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
    "__version__",
]
