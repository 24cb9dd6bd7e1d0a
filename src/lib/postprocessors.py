"""
Built-in postprocessors

A postprocessor is a callable (context, events) -> PostprocessorResult that
runs after a document has been parsed into events and before it is rendered.
It may edit `events` in place (keeping every surviving Start/End pair matched
and never reordering events) and returns a control signal telling the driver
whether to carry on.

Provided here:
    softbreaks_toHardbreaks  - SoftBreak -> HardBreak ("strict line breaks")
    TagFilter / tagFilter_make - skip documents by frontmatter tags
    toc_remove               - drop ```toc / ```table-of-contents blocks
    comments_remove          - strip %%...%% comment spans

Example:
    >>> events = [Event.text_make("a"), Event.softBreak(), Event.text_make("b")]
    >>> softbreaks_toHardbreaks(Context(), events)
    <PostprocessorResult.CONTINUE: 'continue'>
    >>> events[1].kind
    <EventKind.HARD_BREAK: 'hard_break'>
"""

import re
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, List, Protocol, Tuple

from ..models.context import Context, PostprocessorResult
from ..models.events import Event, EventKind
from ..models.rewrite import CommentState, Decision
from .rewrite import events_rewrite, events_rewriteStateless
from .log import LOG


TOC_LABEL_SHORT = "toc"
TOC_LABEL_LONG = "table-of-contents"
TOC_LABELS: FrozenSet[str] = frozenset({TOC_LABEL_SHORT, TOC_LABEL_LONG})

COMMENT_MARKER = "%%"
COMMENT_INLINE_PATTERN = re.compile(r"%%.*?%%")


class Postprocessor(Protocol):
    """Callable contract shared by every postprocessor"""

    def __call__(self, context: Context, events: List[Event]) -> PostprocessorResult:
        ...


def softbreaks_toHardbreaks(context: Context, events: List[Event]) -> PostprocessorResult:
    """
    Convert every soft line break into a hard line break

    Mimics Obsidian's "Strict line breaks" setting being turned off: each
    newline inside a paragraph renders as a line break.
    """
    for index, event in enumerate(events):
        if event.kind is EventKind.SOFT_BREAK:
            events[index] = Event.hardBreak()
    return PostprocessorResult.CONTINUE


@dataclass(frozen=True)
class TagFilter:
    """
    Postprocessor that skips documents based on their frontmatter tags

    Attributes:
        skip_tags: A document carrying any of these is skipped
        only_tags: If non-empty, a document must carry one of these to be kept

    Skip wins: a tag listed in both sets still causes the document to be skipped.
    With both sets empty every document passes.
    """
    skip_tags: FrozenSet[str] = frozenset()
    only_tags: FrozenSet[str] = frozenset()

    def decision_make(self, tags: AbstractSet[str]) -> PostprocessorResult:
        """
        Decide whether a document with `tags` should be emitted

        Args:
            tags: The document's tag set

        Returns:
            STOP_AND_SKIP_NOTE if any tag is in skip_tags, or if only_tags is
            non-empty and none of the tags are in it; CONTINUE otherwise
        """
        skip = not self.skip_tags.isdisjoint(tags)
        include = not self.only_tags or not self.only_tags.isdisjoint(tags)

        if skip or not include:
            return PostprocessorResult.STOP_AND_SKIP_NOTE
        return PostprocessorResult.CONTINUE

    def __call__(self, context: Context, events: List[Event]) -> PostprocessorResult:
        tags = context.tags_get()
        result = self.decision_make(tags)
        if result is not PostprocessorResult.CONTINUE:
            LOG(f"Skipping document with tags {sorted(tags)}", level=3)
        return result


def tagFilter_make(skip_tags: Iterable[str], only_tags: Iterable[str]) -> TagFilter:
    """
    Build a TagFilter from any iterables of tag names

    Args:
        skip_tags: Tags that cause a document to be skipped
        only_tags: Tags a document must carry (empty means "any")

    Returns:
        Immutable, callable TagFilter
    """
    return TagFilter(skip_tags=frozenset(skip_tags), only_tags=frozenset(only_tags))


def toc_decide(event: Event) -> Decision:
    """
    Decide the fate of one event for toc_remove()

    Start markers of fenced blocks labelled with either TOC name are dropped.
    End markers are dropped only for the short name, so a
    ```table-of-contents block leaves its End marker behind.
    """
    if event.tag is None or not event.tag.fencedCodeBlock_is():
        return Decision.keep()

    label = event.tag.label
    if event.kind is EventKind.START and label in TOC_LABELS:
        LOG(f"Dropping '{label}' block start", level=3)
        return Decision.drop()
    # FIXME: the long label keeps its End marker, leaving an unmatched End.
    if event.kind is EventKind.END and label == TOC_LABEL_SHORT:
        return Decision.drop()
    return Decision.keep()


def toc_remove(context: Context, events: List[Event]) -> PostprocessorResult:
    """
    Remove table-of-contents directive blocks

    A fenced code block labelled "toc" or "table-of-contents" is a build-time
    instruction, not content. Only the block's marker events are removed;
    anything a parser placed between them passes through.
    """
    events_rewriteStateless(events, toc_decide)
    return PostprocessorResult.CONTINUE


def comment_decide(event: Event, state: CommentState) -> Tuple[Decision, CommentState]:
    """
    Decide the fate of one event for comments_remove()

    Args:
        event: Current event
        state: Scanner state before this event (see CommentState for the table)

    Returns:
        (decision, state after this event)
    """
    if event.text_is():
        if COMMENT_MARKER not in event.text:
            return (Decision.drop() if state.inside_comment else Decision.keep()), state

        # Markers inside code blocks are literal text
        if state.inside_codeblock:
            return Decision.keep(), state

        if state.inside_comment:
            LOG("Comment span closed", level=3)
            return Decision.drop(), state.comment_close()

        if event.text != COMMENT_MARKER:
            stripped = COMMENT_INLINE_PATTERN.sub("", event.text)
            return Decision.replace(Event.text_make(stripped)), state

        LOG("Comment span opened", level=3)
        return Decision.drop(), state.comment_open()

    if event.codeBlockStart_is():
        next_state = state.codeblock_enter()
    elif event.codeBlockEnd_is():
        next_state = state.codeblock_leave()
    else:
        next_state = state

    if state.inside_comment:
        return Decision.drop(), next_state
    return Decision.keep(), next_state


def comments_remove(context: Context, events: List[Event]) -> PostprocessorResult:
    """
    Strip Obsidian-style %%comments%%

    Comments either sit inside a single text run ("before %%note%% after") or
    span several events, opened and closed by text events holding just the
    marker. A comment that is never closed swallows the rest of the document.
    Markers inside code blocks are left alone.
    """
    final_state = events_rewrite(events, comment_decide, CommentState())
    if final_state.inside_comment:
        LOG("Unterminated comment dropped the remainder of the document", level=2)
    return PostprocessorResult.CONTINUE
