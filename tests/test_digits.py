import pytest

from digits import DIGIT_NAMES, NUMBERS, digit_string, digit_strings
from tutorialbase import ErrorType, TutorialError


@pytest.mark.parametrize(
    "number,expected",
    [(16, "OneSix"), (58, "FiveEight"), (510, "FiveOneZero"), (0, "Zero"), (7, "Seven")],
)
def test_digit_string(number, expected):
    assert digit_string(number) == expected


def test_digit_strings():
    assert digit_strings(NUMBERS) == ["OneSix", "FiveEight", "FiveOneZero"]


def test_table_covers_every_digit():
    assert sorted(DIGIT_NAMES) == list(range(10))


def test_negative_is_rejected():
    with pytest.raises(TutorialError) as exc_info:
        digit_string(-16)
    assert exc_info.value.error_type is ErrorType.VALUE_ERROR
