"""
Markdown event model

Defines the token vocabulary postprocessors operate on. Events are produced
by an external markdown parser as a flat, render-ordered list in which every
structural span is bracketed by a Start(tag) / End(tag) pair.

Only a handful of event kinds are examined by the postprocessors (text runs,
line breaks, code block markers); everything else is carried through as an
opaque value.

Example:
    A fenced code block labelled "toc" arrives as:
        [Event.start(Tag.codeBlock_fenced("toc")),
         Event.end(Tag.codeBlock_fenced("toc"))]
"""

from enum import Enum
from dataclasses import dataclass
from typing import List, Optional


class EventKind(Enum):
    """
    Kinds of events in a markdown event stream
    """
    TEXT = "text"
    CODE = "code"                            # inline `code`
    HTML = "html"
    FOOTNOTE_REFERENCE = "footnote_reference"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"
    RULE = "rule"
    TASK_LIST_MARKER = "task_list_marker"
    START = "start"
    END = "end"


class TagKind(Enum):
    """
    Kinds of structural spans a Start/End pair can bracket
    """
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    LIST = "list"
    ITEM = "item"
    FOOTNOTE_DEFINITION = "footnote_definition"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    LINK = "link"
    IMAGE = "image"


@dataclass(frozen=True)
class Tag:
    """
    Identifies a structural span

    Attributes:
        kind: What sort of span this is
        fenced: For code blocks, True for ``` fences, False for indented blocks
        label: For fenced code blocks, the info string (e.g. "python", "toc");
               None for unlabelled fences and all other tags
    """
    kind: TagKind
    fenced: bool = False
    label: Optional[str] = None

    @classmethod
    def codeBlock_fenced(cls, label: Optional[str] = None) -> "Tag":
        """Tag for a fenced code block with an optional info string"""
        return cls(kind=TagKind.CODE_BLOCK, fenced=True, label=label)

    @classmethod
    def codeBlock_indented(cls) -> "Tag":
        """Tag for an indented (unfenced, unlabelled) code block"""
        return cls(kind=TagKind.CODE_BLOCK)

    def codeBlock_is(self) -> bool:
        return self.kind is TagKind.CODE_BLOCK

    def fencedCodeBlock_is(self) -> bool:
        return self.kind is TagKind.CODE_BLOCK and self.fenced


@dataclass(frozen=True)
class Event:
    """
    One unit of a parsed markdown document

    Attributes:
        kind: Event kind
        text: Payload for TEXT, CODE, HTML and FOOTNOTE_REFERENCE events
        tag: Span identity for START and END events
        checked: Payload for TASK_LIST_MARKER events

    Use the classmethod constructors rather than building events by hand:
        Event.text_make("hello"), Event.softBreak(), Event.start(tag), ...
    """
    kind: EventKind
    text: str = ""
    tag: Optional[Tag] = None
    checked: bool = False

    @classmethod
    def text_make(cls, text: str) -> "Event":
        return cls(kind=EventKind.TEXT, text=text)

    @classmethod
    def code_make(cls, text: str) -> "Event":
        return cls(kind=EventKind.CODE, text=text)

    @classmethod
    def html_make(cls, text: str) -> "Event":
        return cls(kind=EventKind.HTML, text=text)

    @classmethod
    def footnoteReference_make(cls, label: str) -> "Event":
        return cls(kind=EventKind.FOOTNOTE_REFERENCE, text=label)

    @classmethod
    def softBreak(cls) -> "Event":
        return cls(kind=EventKind.SOFT_BREAK)

    @classmethod
    def hardBreak(cls) -> "Event":
        return cls(kind=EventKind.HARD_BREAK)

    @classmethod
    def rule(cls) -> "Event":
        return cls(kind=EventKind.RULE)

    @classmethod
    def taskListMarker(cls, checked: bool) -> "Event":
        return cls(kind=EventKind.TASK_LIST_MARKER, checked=checked)

    @classmethod
    def start(cls, tag: Tag) -> "Event":
        return cls(kind=EventKind.START, tag=tag)

    @classmethod
    def end(cls, tag: Tag) -> "Event":
        return cls(kind=EventKind.END, tag=tag)

    def text_is(self) -> bool:
        return self.kind is EventKind.TEXT

    def codeBlockStart_is(self) -> bool:
        """True for the opening marker of any code block, fenced or indented"""
        return self.kind is EventKind.START and self.tag is not None and self.tag.codeBlock_is()

    def codeBlockEnd_is(self) -> bool:
        """True for the closing marker of any code block, fenced or indented"""
        return self.kind is EventKind.END and self.tag is not None and self.tag.codeBlock_is()


# Render-ordered list of events for one document (or fragment)
EventSequence = List[Event]
