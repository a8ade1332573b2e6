"""Tests for GameFilter."""

from __future__ import annotations

import pytest

from pobsd.core.game_filter import GameFilter, find_game_by_name
from pobsd.models.game import Game, GameField
from pobsd.models.game_status import GameStatus, Status
from pobsd.models.search_type import SearchType


@pytest.fixture
def foozle() -> Game:
    return Game("Foozle", uid=1, tags=["puzzle"], engine="godot", status=GameStatus(Status.PERFECT))


@pytest.fixture
def barrow() -> Game:
    return Game("Barrow Hill", uid=2, tags=["bar", "horror"], year="2006")


class TestCheckGame:
    def test_empty_filter_matches_nothing(self, foozle: Game) -> None:
        game_filter = GameFilter()
        assert game_filter.is_empty()
        assert not game_filter.check_game(foozle, SearchType.NOT_CASE_SENSITIVE)

    def test_or_semantics(self, foozle: Game, barrow: Game) -> None:
        game_filter = GameFilter(name="Foo", tag="bar")
        assert game_filter.check_game(foozle)
        assert game_filter.check_game(barrow)
        assert not game_filter.check_game(Game("Other", tags=["indie"]))

    def test_case_sensitivity(self, foozle: Game) -> None:
        game_filter = GameFilter(name="FOO")
        assert not game_filter.check_game(foozle, SearchType.CASE_SENSITIVE)
        assert game_filter.check_game(foozle, SearchType.NOT_CASE_SENSITIVE)

    def test_status_compares_levels(self, foozle: Game, barrow: Game) -> None:
        game_filter = GameFilter(status=Status.PERFECT)
        assert game_filter.check_game(foozle)
        assert not game_filter.check_game(barrow)

    def test_year_substring(self, barrow: Game) -> None:
        assert GameFilter(year="200").check_game(barrow)
        assert not GameFilter(year="1999").check_game(barrow)

    def test_status_pattern_substring(self, foozle: Game, barrow: Game) -> None:
        game_filter = GameFilter(status_pattern="Perf")
        assert not game_filter.check_game(foozle, SearchType.CASE_SENSITIVE)
        assert game_filter.check_game(foozle, SearchType.NOT_CASE_SENSITIVE)
        assert not game_filter.check_game(barrow, SearchType.NOT_CASE_SENSITIVE)

    def test_status_pattern_nonsense_matches_nothing(self, foozle: Game) -> None:
        assert not GameFilter(status_pattern="no such level").check_game(foozle)


class TestSetters:
    def test_set_chains(self) -> None:
        game_filter = GameFilter().set(GameField.NAME, "Foo").set("tag", "bar")
        assert game_filter == GameFilter(name="Foo", tag="bar")
        assert not game_filter.is_empty()

    def test_set_status(self) -> None:
        assert GameFilter().set("status", Status.PERFECT).status is Status.PERFECT
        assert GameFilter().set(GameField.STATUS, GameStatus(Status.LAUNCHES, "x")).status is Status.LAUNCHES

    def test_set_status_text_is_a_pattern(self) -> None:
        game_filter = GameFilter().set(GameField.STATUS, "Complet")
        assert game_filter.status is None
        assert game_filter.status_pattern == "Complet"

    def test_set_unknown_field(self) -> None:
        with pytest.raises(ValueError):
            GameFilter().set("colour", "red")

    def test_for_field(self) -> None:
        assert GameFilter.for_field(GameField.DEVELOPER, "AX") == GameFilter(developer="AX")


class TestFilterGames:
    def test_preserves_input_order(self, foozle: Game, barrow: Game) -> None:
        games = [barrow, Game("Nil"), foozle]
        assert GameFilter(name="o").filter_games(games) == [barrow, foozle]

    def test_no_match(self, foozle: Game) -> None:
        assert GameFilter(engine="unity").filter_games([foozle]) == []


class TestFindGameByName:
    def test_exact_match_preferred(self) -> None:
        games = [Game("Foo", uid=9), Game("Foobar", uid=1)]
        assert find_game_by_name(games, "Foo").uid == 9

    def test_substring_fallback_lowest_uid(self) -> None:
        games = [Game("Foobar", uid=9), Game("Foobaz", uid=3)]
        assert find_game_by_name(games, "Foo").uid == 3

    def test_case_sensitivity(self) -> None:
        games = [Game("foobar", uid=1)]
        assert find_game_by_name(games, "FOO", SearchType.CASE_SENSITIVE) is None
        assert find_game_by_name(games, "FOO", SearchType.NOT_CASE_SENSITIVE).name == "foobar"

    def test_not_found(self) -> None:
        assert find_game_by_name([], "anything") is None
