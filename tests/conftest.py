from __future__ import annotations

import pytest

from tests.helpers import HEADER, make_character


@pytest.fixture
def small_cast():
    return [
        make_character("Ada", gender="female", alive=False, famous_for="science"),
        make_character("Bob", gender="male", alive=True, famous_for="music", nationality="american"),
        make_character("Cleo", gender="female", alive=False, royalty=True, famous_for="leadership", nationality="egyptian"),
        make_character("Dan", gender="male", alive=True, famous_for="sports", nationality="american"),
        make_character("Eve", gender="female", alive=True, famous_for="music", age_group="young adult"),
        make_character("Finn", gender="male", alive=False, famous_for="art", religion="catholic"),
        make_character("Gus", gender="male", alive=True, royalty=True, famous_for="leadership"),
    ]


@pytest.fixture
def write_csv(tmp_path):
    def _write(*rows: str, header: str = HEADER, name: str = "characters.csv"):
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write
