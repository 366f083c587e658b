import pytest

from pdfshelf.rename.validator import is_likely_author, is_valid_author_name


@pytest.mark.parametrize(
    "text",
    [
        "aaaa",
        "jross1",
        "Jross1",
        "!!!@@@",
        "Abcdefghij" * 15,
        "John, John",
        "Jon, John",
        "Smith-Smyth",
        "A, B, C, D, E, F, G",
        "12345",
        "x",
        "",
        None,
        "lowercase words only",
    ],
)
def test_rejects(text):
    assert not is_valid_author_name(text)


@pytest.mark.parametrize(
    "text",
    [
        "J.K. Rowling",
        "Smith, J.",
        "А. Б. Иванов",
        "Алёна Ёлкина",
        "John R Smith",
        "Kernighan, Ritchie",
        "C Newport",
        "McGraw",
    ],
)
def test_accepts(text):
    assert is_valid_author_name(text)


@pytest.mark.parametrize("text", ["John R Smith", "Smith, J.", "C Newport", "Doe, Jo", "Иванов А Б"])
def test_likely_author(text):
    assert is_likely_author(text)


@pytest.mark.parametrize("text", ["Programming Basics", "Deep Learning", "Kernighan, Ritchie", "jross1"])
def test_not_likely_author(text):
    assert not is_likely_author(text)
