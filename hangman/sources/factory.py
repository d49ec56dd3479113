import random
from typing import Dict
from hangman.errors import UnknownMode
from hangman.game.models import Mode
from hangman.sources.base import WordSource
from hangman.sources.strategies import AdversaryWord, RandomWord, ScrabbleWord
from hangman.words.bank import Dictionary

def parse_mode(mode: Mode | str) -> Mode:
    if isinstance(mode, Mode):
        return mode
    try:
        return Mode(str(mode).lower())
    except ValueError as e:
        raise UnknownMode(mode) from e

def create_word_source(
    mode: Mode | str,
    dictionary: Dictionary,
    length: int,
    rng: random.Random | None = None,
) -> WordSource:
    mode = parse_mode(mode)
    if mode is Mode.RANDOM:
        return RandomWord(dictionary, length, rng=rng)
    elif mode is Mode.SCRABBLE:
        return ScrabbleWord(dictionary, length, rng=rng)
    elif mode is Mode.ADVERSARY:
        return AdversaryWord(dictionary, length, rng=rng)
    else:
        raise UnknownMode(mode)

def mode_descriptions() -> Dict[str, str]:
    return {m.display_name: m.description for m in Mode}
