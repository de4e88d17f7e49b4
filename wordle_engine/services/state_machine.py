"""
Game State Machine

Pure transitions between game states:

    Idle -> Ongoing -> Won | Lost
    any  -> Errored (dictionary or random source failure, corrupt session)

StartNewGame and SwitchLanguage are accepted in every state. EditInput and
SubmitAttempt are only accepted while a game is Ongoing; anywhere else they
raise IllegalTransitionError.
"""

from dataclasses import replace
from typing import Callable, Union

from ..config.game_settings import MAX_ATTEMPTS
from ..exceptions import IllegalTransitionError
from ..models.game import Language, ValidationError
from ..models.state import (
    EditInput, Errored, GameEvent, GameState, Lost, Ongoing,
    StartNewGame, SubmitAttempt, SwitchLanguage, Won, status_name
)
from .dictionary import WordDictionary
from .scorer import score

RandomIndex = Callable[[int], int]
"""Returns a uniformly distributed index in ``[0, n)``."""

DictionaryLoader = Callable[[Language], WordDictionary]


class GameStateMachine:
    """Applies game events to immutable game states."""

    def __init__(self,
                 load_dictionary: DictionaryLoader,
                 random_index: RandomIndex,
                 max_attempts: int = MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.load_dictionary = load_dictionary
        self.random_index = random_index
        self.max_attempts = max_attempts

    def transition(self, state: GameState, event: GameEvent) -> GameState:
        """
        Return the state that follows ``state`` once ``event`` is applied.

        Raises:
            IllegalTransitionError: If the event is not accepted in this state
        """
        if isinstance(event, StartNewGame):
            return self.start(state.language)

        if isinstance(event, SwitchLanguage):
            return self.start(event.language)

        if not isinstance(event, (EditInput, SubmitAttempt)):
            raise TypeError(f"Unknown game event: {event!r}")

        if not isinstance(state, Ongoing):
            raise IllegalTransitionError(status_name(state), type(event).__name__)

        if isinstance(event, EditInput):
            return replace(state, pending_input=event.text)

        return self._submit(state)

    def start(self, language: Language) -> Union[Ongoing, Errored]:
        """Draw a random target from the language's dictionary."""
        dictionary = self._dictionary(language)
        if isinstance(dictionary, Errored):
            return dictionary

        size = len(dictionary)
        if size == 0:
            return Errored(language, f"The {language.display_name} dictionary is empty")

        # The draw is atomic: a valid index or Errored, nothing in between
        try:
            index = self.random_index(size)
        except Exception as e:
            return Errored(language, f"Random word selection failed: {e}")

        if not isinstance(index, int) or not 0 <= index < size:
            return Errored(language, f"Random word selection returned an invalid index: {index!r}")

        return Ongoing(language=language, target=dictionary[index])

    def _submit(self, state: Ongoing) -> GameState:
        if len(state.attempts) >= self.max_attempts:
            return Errored(state.language, "Game is still ongoing with no attempts left")

        dictionary = self._dictionary(state.language)
        if isinstance(dictionary, Errored):
            return dictionary

        result = score(state.target, state.pending_input, dictionary)
        if isinstance(result, ValidationError):
            return replace(state, last_error=result)

        if len(result) != len(state.target):
            return Errored(state.language, f"Scored attempt '{result.word}' does not match the target length")

        attempts = state.attempts + (result,)
        if result.is_winning:
            return Won(state.language, state.target, attempts)
        if len(attempts) >= self.max_attempts:
            return Lost(state.language, state.target, attempts)
        return Ongoing(language=state.language, target=state.target, attempts=attempts)

    def _dictionary(self, language: Language) -> Union[WordDictionary, Errored]:
        try:
            return self.load_dictionary(language)
        except (OSError, ValueError) as e:
            return Errored(language, f"Could not load the {language.display_name} dictionary: {e}")
