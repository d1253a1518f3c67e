from __future__ import annotations

import math
from collections import Counter

import numpy as np
from pydantic import BaseModel, Field

from akinator.engine import Node, iter_internal, leaf_depths


class TreeStats(BaseModel):
    total_characters: int
    theoretical_min: int = Field(description="Questions needed by a perfectly balanced tree")
    theoretical_max: int = Field(description="Questions needed when asking for one character at a time")
    min_questions: int
    max_questions: int
    average_questions: float
    split_usage: dict[str, int] = Field(description="Internal nodes asking about each attribute")


def theoretical_bounds(total: int) -> tuple[int, int]:
    """Best and worst question counts for a dataset of ``total`` characters."""
    if total <= 1:
        return 0, total
    return math.ceil(math.log2(total)), total


def compute_stats(tree: Node) -> TreeStats:
    depths = np.asarray(leaf_depths(tree))
    best, worst = theoretical_bounds(len(depths))

    usage = Counter(node.attribute.value for node in iter_internal(tree))

    return TreeStats(
        total_characters=len(depths),
        theoretical_min=best,
        theoretical_max=worst,
        min_questions=int(np.min(depths)),
        max_questions=int(np.max(depths)),
        average_questions=round(float(np.mean(depths)), 2),
        split_usage=dict(usage.most_common()),
    )
