"""
Game State Machine Models

States a game session moves through and the events that drive it.
All values are immutable; a transition always produces a new state.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .game import Attempt, Language, ValidationError


@dataclass(frozen=True)
class Idle:
    """No target picked yet."""
    language: Language


@dataclass(frozen=True)
class Ongoing:
    """A game in progress. Attempts are ordered oldest first."""
    language: Language
    target: str
    attempts: Tuple[Attempt, ...] = ()
    pending_input: str = ""
    last_error: Optional[ValidationError] = None


@dataclass(frozen=True)
class Won:
    language: Language
    target: str
    attempts: Tuple[Attempt, ...]


@dataclass(frozen=True)
class Lost:
    language: Language
    target: str
    attempts: Tuple[Attempt, ...]


@dataclass(frozen=True)
class Errored:
    """
    Absorbing failure state.

    Reached only on an internal inconsistency (empty dictionary, failing
    random source, corrupt session). Only a new game leaves it.
    """
    language: Language
    message: str


GameState = Union[Idle, Ongoing, Won, Lost, Errored]


@dataclass(frozen=True)
class StartNewGame:
    pass


@dataclass(frozen=True)
class EditInput:
    text: str


@dataclass(frozen=True)
class SubmitAttempt:
    pass


@dataclass(frozen=True)
class SwitchLanguage:
    language: Language


GameEvent = Union[StartNewGame, EditInput, SubmitAttempt, SwitchLanguage]


def status_name(state: GameState) -> str:
    """Lowercase state name used in snapshots and logs."""
    return type(state).__name__.lower()
