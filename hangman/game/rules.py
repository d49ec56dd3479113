from typing import Iterable, List, Tuple
from hangman.errors import NotALetter

# Standard English Scrabble tile values, a = 0 ... z = 25
LETTER_VALUES = (
    1, 3, 3, 2, 1, 4, 2, 4, 1, 8, 5, 1, 3,
    1, 1, 3, 10, 1, 1, 1, 1, 4, 4, 8, 4, 10,
)

def normalize_letter(letter: str) -> str:
    """
    Validates a played character and case-folds it to lower-case.
    """
    if not isinstance(letter, str) or len(letter) != 1 or not ("a" <= letter.lower() <= "z"):
        raise NotALetter(letter)
    return letter.lower()

def scrabble_value(word: str) -> int:
    """
    Sums the tile values of a word, without any board multipliers.
    """
    return sum(LETTER_VALUES[ord(ch) - ord("a")] for ch in word.lower())

def has_unique_letters(word: str) -> bool:
    return len(set(word)) == len(word)

def letter_positions(word: str, letter: str) -> Tuple[int, ...]:
    return tuple(i for i, ch in enumerate(word) if ch == letter)

def partition_by_letter(candidates: Iterable[str], letter: str, length: int) -> List[List[str]]:
    """
    Groups candidates by where a letter would appear in them.

    Bucket 0 holds the candidates without the letter; bucket k holds the
    candidates with the letter at position k - 1. Candidates are expected to
    have distinct letters, so each lands in exactly one bucket.
    """
    buckets: List[List[str]] = [[] for _ in range(length + 1)]
    for word in candidates:
        buckets[word.find(letter) + 1].append(word)
    return buckets

def largest_partition(buckets: List[List[str]]) -> int:
    """
    Index of the biggest bucket. Ties go to the lowest index, so "letter
    absent" wins over any position and earlier positions win over later ones.
    """
    best = 0
    for i in range(1, len(buckets)):
        if len(buckets[i]) > len(buckets[best]):
            best = i
    return best
