from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Union

import pandas as pd

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, "data")
DATA_PATH = os.path.join(DATA_DIR, "characters.csv")

COLUMNS = [
    "name",
    "gender",
    "alive",
    "age_group",
    "famous_for",
    "nationality",
    "religion",
    "royalty",
]
BOOLEAN_COLUMNS = ["alive", "royalty"]
TEXT_COLUMNS = ["gender", "age_group", "famous_for", "nationality", "religion"]

PathLike = Union[str, "os.PathLike[str]"]


class DatasetReadError(RuntimeError):
    """Raised when the dataset file cannot be opened or read."""


class NoDataError(ValueError):
    """Raised when a dataset yields zero usable characters."""


@dataclass(frozen=True)
class Character:
    name: str
    gender: str
    alive: bool
    age_group: str
    famous_for: str
    nationality: str
    religion: str
    royalty: bool


def read_dataset(data_path: PathLike = DATA_PATH) -> pd.DataFrame:
    """Read a comma separated character file into a normalised frame.

    The first line is a header and is skipped. Every other line is split on
    ``,`` with no quoting rules; trailing empty fields do not count, and lines
    with fewer than eight fields are dropped. Text attributes are trimmed and
    lowercased, ``name`` is only trimmed, and the two boolean columns are true
    when the field reads ``yes`` in any casing. Bytes that are not valid
    UTF-8 are replaced rather than rejected.
    """
    try:
        with open(data_path, "r", encoding="utf-8", errors="replace") as fh:
            lines = fh.read().splitlines()
    except OSError as exc:
        raise DatasetReadError(f"Could not read dataset '{data_path}': {exc}") from exc

    rows = pd.Series(lines[1:], dtype=object)
    fields = rows.str.rstrip(",").str.split(",")
    well_formed = fields[fields.str.len() >= len(COLUMNS)]

    skipped = len(fields) - len(well_formed)
    if skipped:
        logging.debug("Skipped %d malformed row(s) in %s.", skipped, data_path)

    df = pd.DataFrame(well_formed.str[: len(COLUMNS)].tolist(), columns=COLUMNS, dtype=object)

    df["name"] = df["name"].str.strip()
    for col in TEXT_COLUMNS:
        df[col] = df[col].str.strip().str.lower()
    for col in BOOLEAN_COLUMNS:
        df[col] = df[col].str.strip().str.lower().eq("yes").astype(bool)

    return df


def load_characters(data_path: PathLike = DATA_PATH) -> list[Character]:
    df = read_dataset(data_path)
    if df.empty:
        raise NoDataError(f"Dataset '{data_path}' had no data!")

    characters = [
        Character(
            name=str(row.name),
            gender=str(row.gender),
            alive=bool(row.alive),
            age_group=str(row.age_group),
            famous_for=str(row.famous_for),
            nationality=str(row.nationality),
            religion=str(row.religion),
            royalty=bool(row.royalty),
        )
        for row in df.itertuples(index=False)
    ]
    logging.info("Loaded %d characters from %s.", len(characters), data_path)
    return characters
