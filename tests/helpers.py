from __future__ import annotations

from akinator.dataset import Character

HEADER = "name,gender,alive,age_group,famous_for,nationality,religion,royalty"


def make_character(
    name: str,
    gender: str = "male",
    alive: bool = True,
    age_group: str = "adult",
    famous_for: str = "science",
    nationality: str = "british",
    religion: str = "none",
    royalty: bool = False,
) -> Character:
    return Character(
        name=name,
        gender=gender,
        alive=alive,
        age_group=age_group,
        famous_for=famous_for,
        nationality=nationality,
        religion=religion,
        royalty=royalty,
    )
