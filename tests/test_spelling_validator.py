from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.models import Word, WordCase
from src.word_check.dictionary import Dictionary
from src.word_check.validator import check_spelling, validate_word

TEAM_WORK = Dictionary(["team", "work"])


def _word(text: str) -> Word:
    return Word(text=text, source_file=Path("example.py"), line_number=1)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("team", []),
        ("TEAM", []),
        ("adsf", ["adsf"]),
        ("teamWork", []),
        ("teamWorkWorkTeam", []),
        ("teamWorkWrkTeam", ["Wrk"]),
        ("teamWorkWrkTem", ["Wrk", "Tem"]),
        ("team_work", []),
        ("team_work_work_team", []),
        ("team_work_wrk_team", ["wrk"]),
        ("team_work_wrk_tem", ["wrk", "tem"]),
    ],
)
def test_validate_word(text: str, expected: list[str]) -> None:
    assert check_spelling(_word(text), TEAM_WORK) == expected


@pytest.mark.parametrize("text", ["team", "Team", "TEAM", "tEAm"])
def test_dictionary_words_validate_in_any_case(text: str) -> None:
    result = validate_word(_word(text), TEAM_WORK)

    assert result.is_correct
    assert result.word_case is WordCase.PLAIN


def test_unknown_plain_word_fails_with_itself() -> None:
    result = validate_word(_word("Wrk"), TEAM_WORK)

    assert not result.is_correct
    assert not result.is_multi_word
    assert result.misspelled == ["Wrk"]


@pytest.mark.parametrize(("first", "second"), [("team", "work"), ("work", "team")])
def test_camel_case_composition(first: str, second: str) -> None:
    result = validate_word(_word(first + second.capitalize()), TEAM_WORK)

    assert result.word_case is WordCase.CAMEL
    assert result.is_correct


@pytest.mark.parametrize(("first", "second"), [("team", "work"), ("work", "team")])
def test_snake_case_composition(first: str, second: str) -> None:
    result = validate_word(_word(f"{first}_{second}"), TEAM_WORK)

    assert result.word_case is WordCase.SNAKE
    assert result.is_correct


def test_empty_snake_case_fragment_is_reported() -> None:
    assert check_spelling(_word("team__work"), TEAM_WORK) == [""]


def test_apostrophes_are_part_of_the_lookup() -> None:
    dictionary = Dictionary(["don't"])

    assert check_spelling(_word("Don't"), dictionary) == []
    assert check_spelling(_word("dont"), dictionary) == ["dont"]
