import pytest

from wordle_engine.models.game import Language
from wordle_engine.services.dictionary import WordDictionary
from wordle_engine.services.game_service import GameService
from wordle_engine.services.state_machine import GameStateMachine

ENGLISH_WORDS = [
    "crane", "slate", "apple", "paper", "allot", "atoll", "spoon", "ooops",
    "abbey", "ebbed", "hello", "world", "lolly", "hotel", "eerie", "geese",
    "there", "lemon", "zesty", "fjord",
]

FRENCH_WORDS = ["cœur", "école", "arbre", "bière", "table"]


class FixedRandom:
    """Random source returning a fixed sequence of indices."""

    def __init__(self, *indices):
        self.indices = list(indices)
        self.calls = []

    def __call__(self, size):
        self.calls.append(size)
        if not self.indices:
            raise RuntimeError("no more indices")
        return self.indices.pop(0)


@pytest.fixture
def english():
    return WordDictionary(Language.EN, ENGLISH_WORDS)


@pytest.fixture
def french():
    return WordDictionary(Language.FR, FRENCH_WORDS)


@pytest.fixture
def loader(english, french):
    dictionaries = {Language.EN: english, Language.FR: french}

    def load(language):
        return dictionaries[language]

    return load


@pytest.fixture
def machine_for(loader):
    """Build a state machine whose random source yields the given indices."""
    def build(*indices, max_attempts=6):
        return GameStateMachine(loader, FixedRandom(*indices), max_attempts=max_attempts)
    return build


@pytest.fixture
def service_for(loader):
    """Build a game service whose random source yields the given indices."""
    def build(*indices, max_attempts=6):
        return GameService(
            max_attempts=max_attempts,
            dictionary_loader=loader,
            random_index=FixedRandom(*indices),
            default_language=Language.EN
        )
    return build
