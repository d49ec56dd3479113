import logging
import random
from typing import List, Optional
from hangman.errors import InvalidLifeCount, InvalidWordLength
from hangman.game.models import GameConfig, GameStatus, Mode, Outcome, TurnRequest, TurnResponse
from hangman.game.rules import normalize_letter
from hangman.sources.factory import create_word_source, parse_mode
from hangman.words.bank import Dictionary

logger = logging.getLogger(__name__)

UNREVEALED_MARK = "_"

class GameSession:
    """
    One play-through of hangman.

    The session owns the lives, the guessed letters and the partially solved
    word, and asks its word source whether each played letter is in the word.
    Once the word is solved or the lives run out the session is over and every
    further play or surrender reports Outcome.GAME_ALREADY_OVER without
    touching any state.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        mode: Mode | str,
        word_length: int,
        max_lives: int,
        rng: random.Random | None = None,
    ):
        # Validate everything before any state is created
        if not dictionary.has_length(word_length):
            raise InvalidWordLength(word_length)
        if max_lives < 1:
            raise InvalidLifeCount(max_lives)

        self.dictionary = dictionary
        self.mode = parse_mode(mode)
        self.word_length = word_length
        self._lives = max_lives
        self._used: List[str] = []
        self._solved: List[Optional[str]] = [None] * word_length
        self.word_source = create_word_source(self.mode, dictionary, word_length, rng=rng)

    @classmethod
    def from_config(cls, dictionary: Dictionary, config: GameConfig, rng: random.Random | None = None):
        return cls(dictionary, config.mode, config.word_length, config.max_lives, rng=rng)

    @property
    def lives_remaining(self) -> int:
        return self._lives

    @property
    def used_letters(self) -> List[str]:
        return list(self._used)

    @property
    def solved_part(self) -> List[Optional[str]]:
        """
        The word with unrevealed positions as None.
        """
        return list(self._solved)

    @property
    def status(self) -> GameStatus:
        if self.is_solved():
            return GameStatus.WON
        if self._lives <= 0:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    def answer(self) -> str:
        return self.word_source.resolved_answer()

    def is_solved(self) -> bool:
        return all(ch is not None for ch in self._solved)

    def is_game_over(self) -> bool:
        return self._lives <= 0 or self.is_solved()

    def has_used(self, letter: str) -> bool:
        return normalize_letter(letter) in self._used

    def play_letter(self, letter: str) -> Outcome:
        """
        Plays one letter. A miss or a repeated letter costs a life; a hit
        reveals every position the letter occupies.
        """
        letter = normalize_letter(letter)
        if self.is_game_over():
            return Outcome.GAME_ALREADY_OVER

        used = letter in self._used
        if used or not self.word_source.has_letter(letter):
            if not used:
                self._used.append(letter)
            self._lives -= 1
            outcome = Outcome.MISS
        else:
            positions = self.word_source.letter_positions(letter) or ()
            solved = list(self._solved)
            for i in positions:
                solved[i] = letter
            # Applied together so a failed lookup leaves no partial reveal
            self._used.append(letter)
            self._solved = solved
            outcome = Outcome.HIT

        if self.is_game_over():
            logger.debug(f"Game over: {self.status.value}, answer {self.answer()!r}")
        return outcome

    def surrender(self) -> Outcome:
        if self.is_game_over():
            return Outcome.GAME_ALREADY_OVER
        self._lives = 0
        logger.debug("Player surrendered")
        return Outcome.SURRENDERED

    def render_solved(self, mark: str = UNREVEALED_MARK) -> str:
        return "".join(ch if ch is not None else mark for ch in self._solved)

    def snapshot(self, outcome: Outcome | None = None) -> TurnResponse:
        return TurnResponse(
            hit=outcome is Outcome.HIT,
            solved_part=self.render_solved(),
            lives_remaining=self._lives,
            game_over=self.is_game_over(),
            won=self.is_solved(),
            outcome=outcome,
            used_letters=self.used_letters,
        )

    def handle(self, request: TurnRequest) -> TurnResponse:
        """
        Applies a guess or surrender request and reports the resulting state.
        """
        if request.action == "surrender":
            outcome = self.surrender()
        else:
            outcome = self.play_letter(request.letter or "")
        return self.snapshot(outcome)
