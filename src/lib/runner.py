"""
Postprocessor chain driver helpers

Runs an ordered chain of postprocessors over one document and builds the
default chain from AppSettings. Deciding what a skipped document means
(not writing it, counting it, ...) is left to the caller.

Example:
    chain = postprocessors_fromSettings(appsettings)
    result = postprocessors_run(context, events, chain, state)
    if result is not PostprocessorResult.STOP_AND_SKIP_NOTE:
        render(events)
"""

from typing import TYPE_CHECKING, List, Optional, Sequence

from ..models.context import Context, PostprocessorResult
from ..models.events import Event
from ..models.state import RunState
from .postprocessors import (
    Postprocessor,
    comments_remove,
    softbreaks_toHardbreaks,
    tagFilter_make,
    toc_remove,
)
from .log import LOG

if TYPE_CHECKING:
    from ..config.settings import AppSettings


class PostprocessorError(Exception):
    """Raised when a postprocessor fails while processing a document"""

    def __init__(self, postprocessor: Postprocessor, message: str):
        self.postprocessor = postprocessor
        super().__init__(f"{postprocessor_name(postprocessor)}: {message}")


def postprocessor_name(postprocessor: Postprocessor) -> str:
    """Human readable name for a postprocessor (function or callable instance)"""
    return getattr(postprocessor, "__name__", type(postprocessor).__name__)


def postprocessors_run(
    context: Context,
    events: List[Event],
    postprocessors: Sequence[Postprocessor],
    state: Optional[RunState] = None,
) -> PostprocessorResult:
    """
    Run postprocessors over one document, in order

    The first postprocessor returning anything other than CONTINUE ends the
    chain for this document and its result is returned.

    Args:
        context: Document context
        events: Document events (edited in place)
        postprocessors: Chain to run
        state: Optional RunState whose counters are updated; while the chain
               runs its `document` names context.destination for LOG()

    Returns:
        CONTINUE if every postprocessor continued, else the stopping result

    Raises:
        PostprocessorError: If a postprocessor raises
    """
    result = PostprocessorResult.CONTINUE
    if state is not None:
        state.document = str(context.destination) if context.destination else None

    try:
        for postprocessor in postprocessors:
            try:
                result = postprocessor(context, events)
            except Exception as e:
                raise PostprocessorError(postprocessor, str(e)) from e

            if result is not PostprocessorResult.CONTINUE:
                LOG(f"{postprocessor_name(postprocessor)} returned {result.name}", level=2)
                break
    finally:
        if state is not None:
            state.document = None

    if state is not None:
        state.result_record(result)
    return result


def postprocessors_fromSettings(settings: "AppSettings") -> List[Postprocessor]:
    """
    Build the default postprocessor chain from settings

    The tag filter runs first so documents that will be skipped do no further
    work. Line break conversion runs last.

    Args:
        settings: AppSettings instance

    Returns:
        Ordered list of postprocessors
    """
    chain: List[Postprocessor] = [tagFilter_make(settings.skip_tags, settings.only_tags)]

    if settings.remove_toc:
        chain.append(toc_remove)
    if settings.remove_comments:
        chain.append(comments_remove)
    if settings.hard_linebreaks:
        chain.append(softbreaks_toHardbreaks)

    LOG(f"Postprocessor chain: {', '.join(postprocessor_name(p) for p in chain)}", level=2)
    return chain
