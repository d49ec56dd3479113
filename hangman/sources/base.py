from abc import ABC, abstractmethod
from typing import Tuple

class WordSource(ABC):
    """
    Abstract base class for anything that answers letter queries about a
    game's secret word.

    The secret word does not have to be fixed at any moment, but every answer
    must stay consistent with the answers already given for the lifetime of
    the instance.
    """

    def __init__(self, length: int):
        self.length = length

    @abstractmethod
    def has_letter(self, letter: str) -> bool:
        """
        True if the secret word contains the (lower-case) letter.
        """
        pass

    @abstractmethod
    def letter_positions(self, letter: str) -> Tuple[int, ...] | None:
        """
        0-based positions of the letter in the secret word, or None if absent.
        """
        pass

    @abstractmethod
    def resolved_answer(self) -> str:
        """
        A concrete word consistent with every answer given so far.
        """
        pass

    def __str__(self) -> str:
        return self.resolved_answer()
