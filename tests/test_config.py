import random
import pytest
from pydantic import ValidationError
from hangman.config import MAX_LIVES, Settings
from hangman.game.models import Mode
from hangman.words.bank import Dictionary

def test_defaults():
    settings = Settings()
    assert settings.mode is Mode.ADVERSARY
    assert settings.word_length == 4
    assert settings.lives == 7
    assert settings.random_length is True

@pytest.mark.parametrize("lives", [0, MAX_LIVES + 1])
def test_lives_out_of_range(lives):
    with pytest.raises(ValidationError):
        Settings(lives=lives)

def test_mode_accepts_string():
    assert Settings(mode="scrabble").mode is Mode.SCRABBLE

def test_fixed_length_is_used_as_is():
    settings = Settings(word_length=5, random_length=False)
    dictionary = Dictionary(["cat", "house"])
    assert settings.resolve_length(dictionary) == 5

def test_random_length_comes_from_dictionary():
    settings = Settings(random_length=True)
    dictionary = Dictionary(["cat", "dog", "house"])
    rng = random.Random(2)
    lengths = {settings.resolve_length(dictionary, rng=rng) for _ in range(50)}
    assert lengths == {3, 5}

def test_game_config():
    settings = Settings(mode=Mode.RANDOM, word_length=3, lives=2, random_length=False)
    config = settings.game_config(Dictionary(["cat"]))
    assert config.mode is Mode.RANDOM
    assert config.word_length == 3
    assert config.max_lives == 2

def test_bundled_dictionary_loads():
    dictionary = Settings().load_dictionary()
    assert dictionary.has_length(Settings().word_length)
    assert dictionary.min_length() == 1
