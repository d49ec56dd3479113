import logging
import random
from typing import List, Optional, Set, Tuple
from hangman.game.rules import (
    has_unique_letters,
    largest_partition,
    letter_positions,
    normalize_letter,
    partition_by_letter,
    scrabble_value,
)
from hangman.sources.base import WordSource
from hangman.words.bank import Dictionary

logger = logging.getLogger(__name__)

class RandomWord(WordSource):
    """
    A secret word drawn uniformly at random when the source is created.
    """

    def __init__(self, dictionary: Dictionary, length: int, rng: random.Random | None = None):
        super().__init__(length)
        self.word = dictionary.random_word(length, rng=rng)

    def has_letter(self, letter: str) -> bool:
        return normalize_letter(letter) in self.word

    def letter_positions(self, letter: str) -> Tuple[int, ...] | None:
        # Repeated letters report every position they occupy
        return letter_positions(self.word, normalize_letter(letter)) or None

    def resolved_answer(self) -> str:
        return self.word

class ScrabbleWord(WordSource):
    """
    A random word biased towards rare letters.

    SAMPLE_SIZE words are drawn independently (with replacement) and the one
    with the highest Scrabble value is kept; ties keep the earliest draw.
    """

    SAMPLE_SIZE = 10

    def __init__(self, dictionary: Dictionary, length: int, rng: random.Random | None = None):
        super().__init__(length)
        self.chosen = RandomWord(dictionary, length, rng=rng)
        best_value = scrabble_value(self.chosen.word)
        for _ in range(1, self.SAMPLE_SIZE):
            candidate = RandomWord(dictionary, length, rng=rng)
            value = scrabble_value(candidate.word)
            if value > best_value:
                self.chosen, best_value = candidate, value

    def has_letter(self, letter: str) -> bool:
        return self.chosen.has_letter(letter)

    def letter_positions(self, letter: str) -> Tuple[int, ...] | None:
        return self.chosen.letter_positions(letter)

    def resolved_answer(self) -> str:
        return self.chosen.resolved_answer()

class AdversaryWord(WordSource):
    """
    A secret word that is never chosen up front.

    The source keeps every dictionary word that is still consistent with the
    answers it has given. When a new letter is queried it splits those
    candidates by where the letter would sit and keeps the largest group,
    so the player learns as little as possible.

    Only words without repeated letters are candidates, which keeps every
    "present" answer down to a single position. If no such word exists for
    the length, a RandomWord answers for the whole life of the instance.
    This greedy choice maximises remaining ambiguity, not lives lost, so it
    is not guaranteed to be the hardest possible opponent.
    """

    def __init__(self, dictionary: Dictionary, length: int, rng: random.Random | None = None):
        super().__init__(length)
        self.candidates: List[str] = [
            w for w in dictionary.words_of_length(length) if has_unique_letters(w)
        ]
        self.queried: Set[str] = set()
        self.partial: List[Optional[str]] = [None] * length
        self.fallback: RandomWord | None = None

        if not self.candidates:
            logger.debug(f"No distinct-letter words of length {length}, using a random word")
            self.fallback = RandomWord(dictionary, length, rng=rng)

    def has_letter(self, letter: str) -> bool:
        letter = normalize_letter(letter)
        if self.fallback is not None:
            return self.fallback.has_letter(letter)
        self._answer(letter)
        return letter in self.partial

    def letter_positions(self, letter: str) -> Tuple[int, ...] | None:
        letter = normalize_letter(letter)
        if self.fallback is not None:
            return self.fallback.letter_positions(letter)
        self._answer(letter)
        if letter in self.partial:
            return (self.partial.index(letter),)
        return None

    def resolved_answer(self) -> str:
        if self.fallback is not None:
            return self.fallback.resolved_answer()
        # Any survivor is consistent; which one can change as queries arrive.
        return self.candidates[0]

    def _answer(self, letter: str) -> None:
        if letter in self.queried:
            return
        self.queried.add(letter)

        buckets = partition_by_letter(self.candidates, letter, self.length)
        chosen = largest_partition(buckets)
        self.candidates = buckets[chosen]
        if chosen:
            self.partial[chosen - 1] = letter

        logger.debug(
            f"Letter {letter!r}: kept bucket {chosen} "
            f"({len(self.candidates)} candidates left)"
        )
