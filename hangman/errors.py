class HangmanError(Exception):
    """
    Base class for every error raised by the hangman engine.
    """

class CorpusUnavailable(HangmanError):
    """The word corpus could not be opened or read."""

class NoWordsOfLength(HangmanError, LookupError):
    def __init__(self, length: int):
        super().__init__(f"Dictionary has no words of length {length}")
        self.length = length

class InvalidWordLength(HangmanError, ValueError):
    def __init__(self, length: int):
        super().__init__(f"Game dictionary has no words of length {length}")
        self.length = length

class InvalidLifeCount(HangmanError, ValueError):
    def __init__(self, lives: int):
        super().__init__(f"Game lives must be positive, got {lives}")
        self.lives = lives

class NotALetter(HangmanError, ValueError):
    def __init__(self, value):
        super().__init__(f"Expected a single alphabetic character, got {value!r}")
        self.value = value

class UnknownMode(HangmanError, ValueError):
    def __init__(self, mode):
        super().__init__(f"Unknown mode: {mode}")
        self.mode = mode
