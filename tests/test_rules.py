import pytest
from hangman.errors import NotALetter
from hangman.game.rules import (
    has_unique_letters,
    largest_partition,
    letter_positions,
    normalize_letter,
    partition_by_letter,
    scrabble_value,
)

@pytest.mark.parametrize("word,expected", [
    ("a", 1),
    ("cat", 5),
    ("quiz", 22),
    ("ZIP", 14),
    ("jaw", 13),
])
def test_scrabble_value(word, expected):
    assert scrabble_value(word) == expected

def test_normalize_letter_folds_case():
    assert normalize_letter("Q") == "q"
    assert normalize_letter("q") == "q"

@pytest.mark.parametrize("bad", ["", "ab", "1", "?", " ", "é", None])
def test_normalize_letter_rejects_non_letters(bad):
    with pytest.raises(NotALetter):
        normalize_letter(bad)

def test_has_unique_letters():
    assert has_unique_letters("lamp")
    assert not has_unique_letters("noon")

def test_letter_positions_finds_repeats():
    assert letter_positions("letter", "t") == (2, 3)
    assert letter_positions("letter", "z") == ()

def test_partition_by_letter():
    buckets = partition_by_letter(["cat", "dog", "pig", "act"], "c", 3)
    assert buckets == [["dog", "pig"], ["cat"], ["act"], []]

def test_largest_partition_prefers_lowest_index_on_ties():
    assert largest_partition([["a"], ["b"], ["c"]]) == 0
    assert largest_partition([[], ["ab"], ["ba"]]) == 1
    assert largest_partition([["x"], [], ["y", "z"]]) == 2
