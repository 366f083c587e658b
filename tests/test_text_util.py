import pytest

from pdfshelf.utils import text_util
from pdfshelf.utils.file_util import sanitize_filename
from pdfshelf.utils.time_util import format_runtime


def test_cleanup_text_collapses_separators():
    assert text_util.cleanup_text("Programming_Basics__-__x") == "Programming Basics - x"
    assert text_util.cleanup_text("  a..b \t c  ") == "a b c"


@pytest.mark.parametrize("value", ["", None])
def test_cleanup_text_identity_on_empty(value):
    assert text_util.cleanup_text(value) == value


def test_character_classes():
    assert text_util.has_letter("123Ж")
    assert not text_util.has_letter("123 !")
    assert text_util.is_only_symbols("!!@#")
    assert not text_util.is_only_symbols("a!")
    assert not text_util.is_only_symbols("")


@pytest.mark.parametrize("word,expected", [("J", True), ("J.", True), ("Ж.", True), ("Ё.", True), ("j", False), ("Jo", False), ("J..", False)])
def test_is_initial(word, expected):
    assert text_util.is_initial(word) is expected


@pytest.mark.parametrize("word,expected", [("Smith", True), ("Иванов", True), ("Алёна", True), ("Ёлкин", True), ("SMITH", False), ("S", False), ("smith", False)])
def test_is_capitalized_word(word, expected):
    assert text_util.is_capitalized_word(word) is expected


def test_strip_edge_dashes():
    assert text_util.strip_edge_dashes(" - Title - ") == "Title"
    assert text_util.strip_edge_dashes("Spider-Man") == "Spider-Man"


def test_sanitize_filename_replaces_invalid_characters():
    assert sanitize_filename('C++: The "Guide"') == "C++- The -Guide-"
    assert sanitize_filename("A / B") == "A - B"
    assert sanitize_filename("Title  -  - Author") == "Title - Author"


def test_format_runtime():
    assert format_runtime(3725.9) == "01:02:05"
    assert format_runtime(0) == "00:00:00"
