import pytest

from launchkit.parsing.whitespace import normalize

SAMPLES = [
    "",
    "   ",
    "a\n\n\n\n\nb",
    "  lead and trail  \n",
    "a  \nb\t\nc",
    "a\n\n \n\nb",
    "a\n \n\t\n  \n\nb  \n\n\n\n",
    "x\r\n\r\n\r\n\r\ny",
    "\n\n\nstart\n\n\n\n\n\n\nend\n\n\n",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize(text)
    assert normalize(once) == once


def test_long_newline_runs_collapse_to_three() -> None:
    assert normalize("First paragraph.\n\n\n\n\n\nSecond paragraph.") == "First paragraph.\n\n\nSecond paragraph."


def test_three_newlines_are_kept() -> None:
    assert normalize("a\n\n\nb") == "a\n\n\nb"


def test_trailing_spaces_are_stripped_per_line() -> None:
    assert normalize("  one  \ntwo\t\t\n  three") == "one\ntwo\n  three"


def test_whitespace_only_lines_join_the_run() -> None:
    assert normalize("a\n\n \n\nb") == "a\n\n\nb"
