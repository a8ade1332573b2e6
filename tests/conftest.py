"""Shared sample databases."""

from __future__ import annotations

import pytest

from pobsd.core.parser import Parser
from pobsd.data.game_database import GameDataBase

LABELS = (
    "Game", "Cover", "Engine", "Setup", "Runtime", "Store", "Hints", "Genre", "Tags",
    "Year", "Dev", "Pub", "Version", "Status", "Added", "Updated", "IgdbId",
)


def game_lines(name: str, **payloads: str) -> list[str]:
    """The 17 lines of a game; fields not given are left without payload."""
    payloads["Game"] = name
    return [f"{label}\t{payloads[label]}" if payloads.get(label) else label for label in LABELS]


AWESOME = game_lines(
    "AaaaaAAaaaAAAaaAAAAaAAAAA!!! for the Awesome",
    Cover="AaaaaA_for_the_Awesome_Cover.jpg",
    Runtime="HumblePlay",
    Store="https://www.humblebundle.com/store/aaaaaaaaaaaaaaaaaaaaaaaaa-for-the-awesome",
    Hints="Demo on HumbleBundle store page",
    Year="2011",
    Added="1970-01-01",
    Updated="1970-01-01",
    IgdbId="12",
)

AETERNUM = game_lines(
    "Aeternum",
    Runtime="hashlink",
    Store="https://store.steampowered.com/app/1256790/Aeternum/ https://www.gog.com/game/aeternum",
    Genre="Shmup",
    Tags="indie,manga",
    Year="2021",
    Dev="Dreamcast Dev, Hydrahat",
    Pub="Dreamcast Dev",
    Status="5 (2022-03-01)",
    Added="2022-03-01",
    Updated="2022-04-02",
    IgdbId="150000",
)

MR_HAT = game_lines(
    "The Adventures of Mr. Hat",
    Engine="godot",
    Runtime="godot",
    Store="https://store.steampowered.com/app/1869200/The_Adventures_of_Mr_Hat/",
    Genre="Puzzle Platformer",
    Tags="indie",
    Dev="AX-GAME",
    Pub="Fun Quarter",
    Version="Early Access",
    Status="runs (2022-05-13)",
    Added="2022-05-13",
    Updated="2022-05-13",
    IgdbId="13",
)

AIRSHIPS = game_lines(
    "Airships: Conquer the Skies",
    Engine="LibGDX",
    Runtime="Airships",
    Store="https://store.steampowered.com/app/342560/Airships_Conquer_the_Skies/",
    Genre="Strategy, Simulation",
    Tags="steampunk",
    Year="2018",
    Dev="David Stark",
    Pub="David Stark",
    Status="6 complete",
    Added="2021-02-10",
    Updated="2021-02-10",
)

ALIEN_SHEPHERD = game_lines(
    "Alien Shepherd",
    Engine="godot",
    Runtime="godot",
    Store="https://scoutshonour.itch.io/alien-shepherd",
    Tags="indie",
    Year="2021",
    Dev="Scouts Honour",
    Pub="Scouts Honour",
    Status="4 minor glitches",
    Added="2021-09-14",
    Updated="2021-09-14",
)


def to_text(*games: list[str]) -> str:
    return "\n".join(line for game in games for line in game) + "\n"


@pytest.fixture
def two_games_text() -> str:
    return to_text(AETERNUM, MR_HAT)


@pytest.fixture
def sample_text() -> str:
    return to_text(AWESOME, AETERNUM, MR_HAT, AIRSHIPS, ALIEN_SHEPHERD)


@pytest.fixture
def db(sample_text: str) -> GameDataBase:
    result = Parser().load_from_string(sample_text)
    assert not result.has_errors
    return GameDataBase(result.games)
