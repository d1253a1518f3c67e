from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from akinator.engine import Internal, Leaf, Node, count_leaves
from akinator.stats import theoretical_bounds

AFFIRMATIVE = "yes"


class Phase(Enum):
    ASKING = "asking"
    CONFIRMING = "confirming"
    DONE = "done"


class Outcome(Enum):
    FOUND = "found"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class PlayState:
    node: Node
    questions_asked: int = 0
    outcome: Optional[Outcome] = None

    @property
    def phase(self) -> Phase:
        if self.outcome is not None:
            return Phase.DONE
        if isinstance(self.node, Leaf):
            return Phase.CONFIRMING
        return Phase.ASKING


def start(tree: Node) -> PlayState:
    return PlayState(node=tree)


def normalize_answer(raw: str) -> str:
    return raw.strip().lower()


def transition(state: PlayState, answer: str) -> PlayState:
    """Advance the game by one normalised answer.

    Only the exact answer ``yes`` is affirmative; anything else, including an
    empty line, counts as no.
    """
    affirmative = answer == AFFIRMATIVE
    node = state.node
    phase = state.phase

    if phase is Phase.ASKING and isinstance(node, Internal):
        return replace(
            state,
            node=node.yes if affirmative else node.no,
            questions_asked=state.questions_asked + 1,
        )

    if phase is Phase.CONFIRMING:
        return replace(state, outcome=Outcome.FOUND if affirmative else Outcome.NO_MATCH)

    raise ValueError("The game is already over")


def prompt(state: PlayState) -> str:
    node = state.node
    if isinstance(node, Internal) and state.phase is Phase.ASKING:
        return f"{node.question}  (remaining {count_leaves(node.yes)}/{count_leaves(node.no)})"
    if isinstance(node, Leaf) and state.phase is Phase.CONFIRMING:
        return f"Is your character {node.character.name}? (yes/no)"
    raise ValueError("No question is pending once the game is over")


def outcome_message(state: PlayState) -> str:
    if state.outcome is Outcome.FOUND:
        return f"Found in {state.questions_asked} questions!"
    if state.outcome is Outcome.NO_MATCH:
        return f"Stopped after {state.questions_asked} questions - no match."
    raise ValueError("The game has no outcome yet")


def reference_line(tree: Node) -> str:
    best, worst = theoretical_bounds(count_leaves(tree))
    return f"Ideal best: {best}, Worst: {worst}"


def read_answer(read_line: Callable[[], str]) -> str:
    try:
        raw = read_line()
    except EOFError:
        logging.debug("Input closed; reading the answer as no.")
        raw = ""
    return normalize_answer(raw)


def play(
    tree: Node,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> PlayState:
    """Walk ``tree`` interactively until the final guess is confirmed or refused."""
    state = start(tree)
    while state.phase is not Phase.DONE:
        write(prompt(state))
        state = transition(state, read_answer(read_line))

    write(outcome_message(state))
    write(reference_line(tree))
    logging.info("Game finished: %s after %d questions.", state.outcome, state.questions_asked)
    return state
