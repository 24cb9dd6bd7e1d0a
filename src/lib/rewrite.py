"""
Event stream rewriting

Applies a per-event decision function to an event list and writes the result
back into the same list object, so callers holding a reference to the list
see the edited stream.
"""

from typing import Callable, List, Tuple, TypeVar

from ..models.events import Event
from ..models.rewrite import Action, Decision


S = TypeVar("S")


def decision_apply(decision: Decision, event: Event, output: List[Event]) -> None:
    """Append the outcome of one decision to `output`"""
    if decision.action is Action.KEEP:
        output.append(event)
    elif decision.action is Action.REPLACE:
        if decision.event is None:
            raise ValueError("REPLACE decision carries no event")
        output.append(decision.event)
    # Action.DROP appends nothing


def events_rewrite(
    events: List[Event],
    decide: Callable[[Event, S], Tuple[Decision, S]],
    state: S,
) -> S:
    """
    Rewrite `events` in place with a stateful decision function

    Each event is passed, together with the current state, to `decide`,
    which returns what to do with the event and the state for the next one.

    Args:
        events: Event list to rewrite (mutated in place)
        decide: (event, state) -> (Decision, next_state)
        state: Initial scanner state

    Returns:
        The state after the last event
    """
    output: List[Event] = []
    for event in events:
        decision, state = decide(event, state)
        decision_apply(decision, event, output)
    events[:] = output
    return state


def events_rewriteStateless(
    events: List[Event], decide: Callable[[Event], Decision]
) -> None:
    """Rewrite `events` in place with a decision function that needs no state"""
    output: List[Event] = []
    for event in events:
        decision_apply(decide(event), event, output)
    events[:] = output
