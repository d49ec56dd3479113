from enum import Enum
from typing import Literal
from pydantic import BaseModel, Field

class Mode(str, Enum):
    RANDOM = "random"
    SCRABBLE = "scrabble"
    ADVERSARY = "adversary"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return MODE_DESCRIPTIONS[self]

MODE_DESCRIPTIONS = {
    Mode.RANDOM: "Selects a word randomly.",
    Mode.SCRABBLE: "From a small random sample, selects the 'best' Scrabble word.",
    Mode.ADVERSARY: "Always selects a 'most difficult' word for you to guess... ;)",
}

class Outcome(str, Enum):
    HIT = "hit"
    MISS = "miss"
    SURRENDERED = "surrendered"
    GAME_ALREADY_OVER = "game_already_over"

class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

class GameConfig(BaseModel):
    mode: Mode = Mode.ADVERSARY
    word_length: int = Field(ge=1)   # Must exist in the dictionary
    max_lives: int = Field(ge=1)

class TurnRequest(BaseModel):
    action: Literal["guess", "surrender"]
    letter: str | None = None    # Required for "guess"

class TurnResponse(BaseModel):
    hit: bool
    solved_part: str             # Unrevealed slots rendered as UNREVEALED_MARK
    lives_remaining: int
    game_over: bool
    won: bool
    outcome: Outcome | None = None
    used_letters: list[str] = Field(default_factory=list)
