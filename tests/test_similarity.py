import pytest

from pdfshelf.utils.similarity import edit_distance


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("Smith", "Smyth", 1),
        ("Иванов", "Иванова", 1),
    ],
)
def test_known_distances(a, b, expected):
    assert edit_distance(a, b) == expected


@pytest.mark.parametrize("s", ["", "a", "Rowling", "А. Б. Иванов"])
def test_zero_for_identical(s):
    assert edit_distance(s, s) == 0


@pytest.mark.parametrize("a,b", [("John", "Jon"), ("Smith", "J."), ("", "x"), ("Knuth", "Kernighan")])
def test_symmetric_and_positive_for_different(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)
    assert edit_distance(a, b) > 0


def test_triangle_inequality():
    words = ["Smith", "Smyth", "Smithe", "Jones", ""]
    for a in words:
        for b in words:
            for c in words:
                assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_long_inputs_are_capped():
    assert edit_distance("x" * 500, "y" * 500) == 100
