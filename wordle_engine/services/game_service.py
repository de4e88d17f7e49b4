"""
Game Service

Owns game sessions and drives them through the game state machine.
"""

import random
import uuid
from typing import Dict, Iterable, Optional

from ..config.app_config import Config
from ..exceptions import SessionNotFoundError
from ..models.game import Attempt, GameSnapshot, Language, LetterStatus
from ..models.state import (
    EditInput, Errored, GameEvent, GameState, Idle, Lost, Ongoing,
    StartNewGame, SubmitAttempt, SwitchLanguage, Won, status_name
)
from ..utils.game_logger import game_logger
from .dictionary import load_dictionary
from .state_machine import DictionaryLoader, GameStateMachine, RandomIndex

# Higher wins when several attempts report on the same letter
_STATUS_PRIORITY = {
    LetterStatus.UNUSED: 0,
    LetterStatus.HANDLED: 1,
    LetterStatus.MISPLACED: 2,
    LetterStatus.CORRECT: 3,
}


class GameService:
    """
    Core game service managing game sessions.

    This class handles:
    - Session management with unique session IDs
    - Dispatching player events to the state machine
    - Logging player actions and game outcomes
    - Read-only snapshots that hide the answer until the game is over
    """

    def __init__(self,
                 max_attempts: Optional[int] = None,
                 dictionary_loader: DictionaryLoader = load_dictionary,
                 random_index: RandomIndex = random.randrange,
                 default_language: Optional[Language] = None):
        self.machine = GameStateMachine(
            load_dictionary=dictionary_loader,
            random_index=random_index,
            max_attempts=max_attempts if max_attempts is not None else Config.MAX_ATTEMPTS
        )
        self.default_language = default_language or Language.from_code(Config.DEFAULT_LANGUAGE)
        self.sessions: Dict[str, GameState] = {}

    @property
    def max_attempts(self) -> int:
        return self.machine.max_attempts

    def create_game(self, language: Optional[Language] = None) -> str:
        """
        Creates a new session and starts a game in it.

        Args:
            language: Dictionary language, defaults to the configured one

        Returns:
            str: Unique session ID
        """
        session_id = str(uuid.uuid4())
        self.sessions[session_id] = Idle(language or self.default_language)
        self.dispatch(session_id, StartNewGame())
        return session_id

    def get_state(self, session_id: str) -> Optional[GameState]:
        return self.sessions.get(session_id)

    def dispatch(self, session_id: str, event: GameEvent) -> GameState:
        """
        Apply an event to a session and store the resulting state.

        Raises:
            SessionNotFoundError: If the session does not exist
            IllegalTransitionError: If the event is not accepted in the current state
        """
        if session_id not in self.sessions:
            raise SessionNotFoundError(session_id)

        previous = self.sessions[session_id]
        game_logger.log_player_action(
            session_id, _event_name(event),
            state=status_name(previous), **_event_details(event)
        )

        state = self.machine.transition(previous, event)
        self.sessions[session_id] = state
        self._log_outcome(session_id, event, state)
        return state

    def start_new_game(self, session_id: str) -> GameState:
        return self.dispatch(session_id, StartNewGame())

    def switch_language(self, session_id: str, language: Language) -> GameState:
        return self.dispatch(session_id, SwitchLanguage(language))

    def edit_input(self, session_id: str, text: str) -> GameState:
        return self.dispatch(session_id, EditInput(text))

    def submit_attempt(self, session_id: str, text: Optional[str] = None) -> GameState:
        """Submit the pending input, optionally replacing it with ``text`` first."""
        if text is not None:
            self.edit_input(session_id, text)
        return self.dispatch(session_id, SubmitAttempt())

    def get_snapshot(self, session_id: str) -> Optional[GameSnapshot]:
        """
        Returns a serializable view of a session (without revealing the answer
        while the game is still being played).
        """
        state = self.sessions.get(session_id)
        if state is None:
            return None

        attempts = getattr(state, 'attempts', ())
        game_over = isinstance(state, (Won, Lost))
        last_error = state.last_error if isinstance(state, Ongoing) else None

        if isinstance(state, Errored):
            error_message: Optional[str] = state.message
        else:
            error_message = last_error.message if last_error else None

        return GameSnapshot(
            session_id=session_id,
            status=status_name(state),
            language=state.language.value,
            current_round=len(attempts),
            max_attempts=self.max_attempts,
            remaining_attempts=max(0, self.max_attempts - len(attempts)),
            game_over=game_over,
            won=isinstance(state, Won),
            guesses=[attempt.word for attempt in attempts],
            guess_results=[attempt.to_pairs() for attempt in attempts],
            letter_status=letter_summary(attempts),
            pending_input=state.pending_input if isinstance(state, Ongoing) else "",
            last_error=error_message,
            error_kind=last_error.kind.value if last_error else None,
            answer=state.target if game_over else None
        )

    def delete_game(self, session_id: str) -> bool:
        """
        Removes a session from memory.

        Returns:
            bool: True if the session was deleted, False if not found
        """
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def _log_outcome(self, session_id: str, event: GameEvent, state: GameState) -> None:
        if isinstance(state, Errored):
            game_logger.log_error(_event_name(event), state.message, session_id)
        elif isinstance(event, (StartNewGame, SwitchLanguage)):
            game_logger.log_game_event(session_id, 'game_started', language=state.language.value)
        elif isinstance(event, SubmitAttempt) and isinstance(state, Ongoing) and state.last_error:
            game_logger.log_validation_error(
                session_id, state.last_error.kind.value, state.last_error.message,
                guess=state.pending_input
            )
        elif isinstance(state, Won):
            game_logger.log_game_event(session_id, 'game_won', rounds=len(state.attempts), answer=state.target)
        elif isinstance(state, Lost):
            game_logger.log_game_event(session_id, 'game_lost', rounds=len(state.attempts), answer=state.target)


def letter_summary(attempts: Iterable[Attempt]) -> Dict[str, str]:
    """
    Best known status of every letter across attempts (keyboard hints).

    Letters never guessed are absent from the result. A status only moves
    up in priority: UNUSED < HANDLED < MISPLACED < CORRECT.
    """
    summary: Dict[str, LetterStatus] = {}
    for attempt in attempts:
        for letter in attempt.letters:
            current = summary.get(letter.char)
            if current is None or _STATUS_PRIORITY[letter.status] > _STATUS_PRIORITY[current]:
                summary[letter.char] = letter.status
    return {char: summary[char].value for char in sorted(summary)}


def _event_name(event: GameEvent) -> str:
    return {
        StartNewGame: 'start_new_game',
        EditInput: 'edit_input',
        SubmitAttempt: 'submit_attempt',
        SwitchLanguage: 'switch_language',
    }.get(type(event), type(event).__name__)


def _event_details(event: GameEvent) -> dict:
    if isinstance(event, EditInput):
        return {'text': event.text}
    if isinstance(event, SwitchLanguage):
        return {'language': event.language.value}
    return {}


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
