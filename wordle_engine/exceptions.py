"""Exceptions raised for programming errors (misuse of the engine)."""


class GameError(Exception):
    """Base class for engine errors."""


class IllegalTransitionError(GameError):
    """An event was dispatched in a state that does not accept it."""

    def __init__(self, state_name: str, event_name: str):
        self.state_name = state_name
        self.event_name = event_name
        super().__init__(f"Cannot apply {event_name} while the game is {state_name}")


class SessionNotFoundError(GameError):
    """No session is registered under the given id."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Game not found: {session_id}")
