from __future__ import annotations

import json

import pytest

from akinator.dataset import DATA_PATH, load_characters
from akinator.engine import build_tree
from akinator.stats import TreeStats, compute_stats, theoretical_bounds
from tests.helpers import make_character


@pytest.mark.parametrize(
    "total, expected",
    [
        (1, (0, 1)),
        (2, (1, 2)),
        (7, (3, 7)),
        (50, (6, 50)),
    ],
)
def test_theoretical_bounds(total, expected):
    assert theoretical_bounds(total) == expected


def test_compute_stats_over_clones():
    clones = [make_character(f"Clone {i}") for i in range(4)]

    stats = compute_stats(build_tree(clones))

    assert stats.total_characters == 4
    assert stats.min_questions == 1
    assert stats.max_questions == 3
    assert stats.average_questions == 2.25
    assert stats.split_usage == {"name": 3}


def test_compute_stats_single_leaf():
    stats = compute_stats(build_tree([make_character("Ada")]))

    assert stats.min_questions == stats.max_questions == 0
    assert stats.split_usage == {}


def test_bundled_dataset_matches_reference_numbers():
    stats = compute_stats(build_tree(load_characters(DATA_PATH)))

    assert stats.total_characters == 50
    assert (stats.theoretical_min, stats.theoretical_max) == (6, 50)
    assert stats.min_questions <= stats.average_questions <= stats.max_questions
    assert sum(stats.split_usage.values()) == 49


def test_stats_serialise_to_json(small_cast):
    stats = compute_stats(build_tree(small_cast))

    payload = json.loads(stats.model_dump_json())

    assert TreeStats(**payload) == stats
    assert payload["total_characters"] == len(small_cast)


def test_compute_stats_over_long_name_chain():
    clones = [make_character(f"Clone {i}") for i in range(1000)]

    stats = compute_stats(build_tree(clones))

    assert stats.max_questions == 999
    assert stats.split_usage == {"name": 999}
