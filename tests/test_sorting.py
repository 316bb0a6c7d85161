import pytest

from sorting import NAMES, SORT_FORMS, backward, sorted_by

EXPECTED = ["Ewa", "Daniella", "Chris", "Barry", "Alex"]


def test_backward():
    assert backward("Ewa", "Alex")
    assert not backward("Alex", "Ewa")


@pytest.mark.parametrize("label,sort", SORT_FORMS)
def test_every_form_sorts_descending(label, sort):
    assert sort(NAMES) == EXPECTED
    assert NAMES == ["Chris", "Alex", "Ewa", "Barry", "Daniella"]


def test_descending_sort_is_idempotent():
    once = sorted_by(NAMES, backward)
    assert sorted_by(once, backward) == once


def test_ties_keep_original_order():
    words = ["bb", "a", "cc", "b"]
    assert sorted_by(words, lambda x, y: len(x) > len(y)) == ["bb", "cc", "a", "b"]
