import logging
import random
import re
from typing import Dict, Iterable, List, TextIO, Tuple
from hangman.errors import CorpusUnavailable, NoWordsOfLength

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"[a-z]+")

class Dictionary:
    """
    Holds the word corpus grouped by word length.

    Bucket ``i`` of the internal list holds every word of length ``i + 1``.
    Tokens that are not purely ASCII alphabetic are discarded; accepted
    words are lower-cased. The instance is read-only once built and can be
    shared between game sessions.
    """

    def __init__(self, words: Iterable[str], rng: random.Random | None = None):
        buckets: List[List[str]] = []
        for token in words:
            word = token.lower()
            if not WORD_PATTERN.fullmatch(word):
                continue
            index = len(word) - 1  # bucket index = word length - 1
            while index >= len(buckets):
                buckets.append([])
            buckets[index].append(word)

        self._buckets: Tuple[Tuple[str, ...], ...] = tuple(tuple(b) for b in buckets)
        self.rng = rng or random.Random()

        if self.total_word_count():
            logger.info(
                f"Loaded {self.total_word_count()} words "
                f"(lengths {self.min_length()}-{self.max_length()})"
            )
        else:
            logger.warning("Dictionary built without any usable words")

    @classmethod
    def from_stream(cls, stream: TextIO, rng: random.Random | None = None):
        try:
            text = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusUnavailable(f"Could not read word corpus: {e}") from e
        return cls(text.split(), rng=rng)

    @classmethod
    def from_file(cls, filepath: str, rng: random.Random | None = None):
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return cls.from_stream(f, rng=rng)
        except OSError as e:
            raise CorpusUnavailable(f"Could not open word corpus {filepath}: {e}") from e

    def has_length(self, length: int) -> bool:
        if length < 1 or length > len(self._buckets):
            return False
        return bool(self._buckets[length - 1])

    def words_of_length(self, length: int) -> Tuple[str, ...]:
        if not self.has_length(length):
            raise NoWordsOfLength(length)
        return self._buckets[length - 1]

    def random_word(self, length: int, rng: random.Random | None = None) -> str:
        words = self.words_of_length(length)
        return (rng or self.rng).choice(words)

    def total_word_count(self) -> int:
        return sum(len(b) for b in self._buckets)

    def min_length(self) -> int:
        if not self._buckets:
            return 0
        length = 1
        while not self.has_length(length):
            length += 1
        return length

    def max_length(self) -> int:
        # Buckets are only ever created up to the longest accepted word.
        return len(self._buckets)

    def random_length(self, rng: random.Random | None = None) -> int:
        """
        Pick a word length with probability proportional to how many words
        have that length.
        """
        total = self.total_word_count()
        if total == 0:
            raise NoWordsOfLength(0)
        weight = (rng or self.rng).randint(1, total)
        length = 0
        for bucket in self._buckets:
            length += 1
            weight -= len(bucket)
            if weight <= 0:
                break
        return length

    def length_histogram(self) -> Dict[int, int]:
        return {
            i + 1: len(bucket)
            for i, bucket in enumerate(self._buckets)
            if bucket
        }

    def __len__(self) -> int:
        return self.total_word_count()
