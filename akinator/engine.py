from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Union

from akinator.dataset import Character, NoDataError


class Attribute(str, Enum):
    """Attributes a question can test. Values match ``Character`` field names."""

    ALIVE = "alive"
    ROYALTY = "royalty"
    GENDER = "gender"
    AGE_GROUP = "age_group"
    FAMOUS_FOR = "famous_for"
    NATIONALITY = "nationality"
    RELIGION = "religion"
    NAME = "name"


BOOLEAN_ATTRIBUTES = (Attribute.ALIVE, Attribute.ROYALTY)
CATEGORICAL_ATTRIBUTES = (
    Attribute.GENDER,
    Attribute.AGE_GROUP,
    Attribute.FAMOUS_FOR,
    Attribute.NATIONALITY,
    Attribute.RELIGION,
)

QUESTION_TEMPLATES = {
    Attribute.ALIVE: "Is the person alive?",
    Attribute.ROYALTY: "Is the person royalty?",
    Attribute.GENDER: "Is the person {value}?",
    Attribute.AGE_GROUP: "Is the person's age group {value}?",
    Attribute.FAMOUS_FOR: "Is the person famous for {value}?",
    Attribute.NATIONALITY: "Is the person from {value}?",
    Attribute.RELIGION: "Is the person's religion {value}?",
    Attribute.NAME: "Is your character {value}?",
}


def attribute_value(character: Character, attribute: Attribute) -> Union[str, bool]:
    return getattr(character, attribute.value)


def question_text(attribute: Attribute, value: Union[str, bool]) -> str:
    return QUESTION_TEMPLATES[attribute].format(value=value)


@dataclass(frozen=True)
class Leaf:
    character: Character


@dataclass(frozen=True)
class Internal:
    attribute: Attribute
    value: Union[str, bool]
    question: str
    yes: Node
    no: Node


Node = Union[Leaf, Internal]


@dataclass(frozen=True)
class Split:
    attribute: Attribute
    value: Union[str, bool]
    yes_count: int
    no_count: int

    @property
    def imbalance(self) -> int:
        return abs(self.yes_count - self.no_count)

    @property
    def question(self) -> str:
        return question_text(self.attribute, self.value)

    def matches(self, character: Character) -> bool:
        return attribute_value(character, self.attribute) == self.value


def candidate_splits(candidates: Sequence[Character]) -> Iterator[Split]:
    """Yield every eligible split in scan order.

    Boolean attributes come first, then categorical attributes with their
    distinct values in first-seen order. A split is eligible only when both
    sides would be non-empty.
    """
    n = len(candidates)

    for attribute in BOOLEAN_ATTRIBUTES:
        yes_count = sum(1 for c in candidates if attribute_value(c, attribute))
        if 0 < yes_count < n:
            yield Split(attribute, True, yes_count, n - yes_count)

    for attribute in CATEGORICAL_ATTRIBUTES:
        counts = Counter(attribute_value(c, attribute) for c in candidates)
        for value, yes_count in counts.items():
            if 0 < yes_count < n:
                yield Split(attribute, value, yes_count, n - yes_count)


def best_split(candidates: Sequence[Character]) -> Optional[Split]:
    best: Optional[Split] = None
    for split in candidate_splits(candidates):
        # strict comparison: the first split found wins ties
        if best is None or split.imbalance < best.imbalance:
            best = split
    return best


def build_tree(candidates: Sequence[Character]) -> Node:
    """Greedily build a yes/no discriminator tree over ``candidates``.

    Each internal node asks the question whose split is closest to an even
    halving of the remaining candidates. When no attribute tells the
    candidates apart, the first one is asked for by name.
    """
    candidates = list(candidates)
    if not candidates:
        raise NoDataError("Cannot build a tree from zero characters")

    if len(candidates) == 1:
        return Leaf(candidates[0])

    split = best_split(candidates)
    if split is None:
        return _name_split(candidates)

    return build_internal(candidates, split)


def build_internal(candidates: Sequence[Character], split: Split) -> Internal:
    yes_list = [c for c in candidates if split.matches(c)]
    no_list = [c for c in candidates if not split.matches(c)]

    if not yes_list or not no_list:
        logging.warning(
            "Split '%s' left an empty branch over %d candidates; substituting a leaf for %s.",
            split.question,
            len(candidates),
            candidates[0].name,
        )

    yes_node = build_tree(yes_list) if yes_list else Leaf(candidates[0])
    no_node = build_tree(no_list) if no_list else Leaf(candidates[0])

    return Internal(split.attribute, split.value, split.question, yes_node, no_node)


def _ask_by_name(character: Character, no_node: Node) -> Internal:
    return Internal(
        Attribute.NAME,
        character.name,
        question_text(Attribute.NAME, character.name),
        Leaf(character),
        no_node,
    )


def _name_split(candidates: list[Character]) -> Internal:
    """Ask for each candidate by name in turn, the last two sharing one question.

    Every suffix of a list with no eligible split has none either, so the
    chain is built from the tail upwards instead of recursing per candidate.
    """
    logging.debug("No attribute separates %d candidates; asking for them by name.", len(candidates))

    node = _ask_by_name(candidates[-2], Leaf(candidates[-1]))
    for character in reversed(candidates[:-2]):
        node = _ask_by_name(character, node)
    return node


def count_leaves(node: Node) -> int:
    total = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Leaf):
            total += 1
        else:
            stack.append(current.no)
            stack.append(current.yes)
    return total


def leaf_depths(node: Node) -> list[int]:
    """Questions needed to reach each leaf, ordered yes-branch first."""
    depths: list[int] = []
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, Leaf):
            depths.append(depth)
        else:
            stack.append((current.no, depth + 1))
            stack.append((current.yes, depth + 1))
    return depths


def iter_internal(node: Node) -> Iterator[Internal]:
    """Internal nodes in pre-order, yes-branch first."""
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Internal):
            yield current
            stack.append(current.no)
            stack.append(current.yes)
