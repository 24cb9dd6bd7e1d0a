"""
Rewrite decision models

Postprocessors that edit the event stream express each edit as a Decision
about one input event. lib.rewrite folds those decisions into a new stream.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from .events import Event


class Action(Enum):
    """What to do with the current event"""
    KEEP = "keep"
    DROP = "drop"
    REPLACE = "replace"


@dataclass(frozen=True)
class Decision:
    """
    Outcome of examining a single event

    Attributes:
        action: KEEP the event, DROP it, or REPLACE it with `event`
        event: Replacement event (only meaningful for REPLACE)
    """
    action: Action
    event: Optional[Event] = None

    @classmethod
    def keep(cls) -> "Decision":
        return cls(action=Action.KEEP)

    @classmethod
    def drop(cls) -> "Decision":
        return cls(action=Action.DROP)

    @classmethod
    def replace(cls, event: Event) -> "Decision":
        return cls(action=Action.REPLACE, event=event)


@dataclass(frozen=True)
class CommentState:
    """
    Scanner state for the comment stripper

    Two independent flags give four combinations:

        inside_comment  inside_codeblock  effect on the next event
        --------------  ----------------  ------------------------------------
        False           False             text: strip inline %%..%% pairs; a
                                          lone "%%" opens a comment
        False           True              text is literal, markers included
        True            False             everything dropped; the next text
                                          holding "%%" closes the comment
        True            True              still dropped; text holding "%%" is
                                          kept verbatim and does NOT close

    Code block Start/End markers flip inside_codeblock in every row, but are
    themselves dropped while inside_comment is set.
    """
    inside_comment: bool = False
    inside_codeblock: bool = False

    def comment_open(self) -> "CommentState":
        return CommentState(inside_comment=True, inside_codeblock=self.inside_codeblock)

    def comment_close(self) -> "CommentState":
        return CommentState(inside_comment=False, inside_codeblock=self.inside_codeblock)

    def codeblock_enter(self) -> "CommentState":
        return CommentState(inside_comment=self.inside_comment, inside_codeblock=True)

    def codeblock_leave(self) -> "CommentState":
        return CommentState(inside_comment=self.inside_comment, inside_codeblock=False)
