import random
from pathlib import Path
from pydantic import BaseModel, Field
from hangman.game.models import GameConfig, Mode
from hangman.words.bank import Dictionary

DEFAULT_DICTIONARY = Path(__file__).resolve().parent / "data" / "words_en.txt"

MIN_LIVES = 1
MAX_LIVES = 25

class Settings(BaseModel):
    """
    Parameters a presentation layer applies to each new game.
    """
    dictionary_path: Path = DEFAULT_DICTIONARY
    mode: Mode = Mode.ADVERSARY
    word_length: int = Field(4, ge=1)
    lives: int = Field(7, ge=MIN_LIVES, le=MAX_LIVES)
    random_length: bool = True   # Re-roll the length before every game

    def load_dictionary(self, rng: random.Random | None = None) -> Dictionary:
        return Dictionary.from_file(str(self.dictionary_path), rng=rng)

    def resolve_length(self, dictionary: Dictionary, rng: random.Random | None = None) -> int:
        if self.random_length:
            return dictionary.random_length(rng=rng)
        return self.word_length

    def game_config(self, dictionary: Dictionary, rng: random.Random | None = None) -> GameConfig:
        return GameConfig(
            mode=self.mode,
            word_length=self.resolve_length(dictionary, rng=rng),
            max_lives=self.lives,
        )
