import random
import pytest
from hangman.words.bank import Dictionary

class ScriptedRandom(random.Random):
    """
    Replays fixed answers for choice() and randint() so draws can be asserted.
    """

    def __init__(self, choices=(), ints=()):
        super().__init__(0)
        self.choices = list(choices)
        self.ints = list(ints)
        self.choice_calls = 0

    def choice(self, seq):
        self.choice_calls += 1
        value = self.choices.pop(0)
        assert value in seq
        return value

    def randint(self, a, b):
        value = self.ints.pop(0)
        assert a <= value <= b
        return value

@pytest.fixture
def scripted():
    return ScriptedRandom

@pytest.fixture
def small_dictionary():
    return Dictionary(
        "cat dog pig sky fox cow ant owl bee "
        "lamp frog milk wolf duck "
        "letter noon moon".split(),
        rng=random.Random(7),
    )
