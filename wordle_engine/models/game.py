"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Classification of one guessed letter against the target word."""
    UNUSED = "UNUSED"          # not in the target
    CORRECT = "CORRECT"        # right letter, right position
    MISPLACED = "MISPLACED"    # right letter, wrong position
    HANDLED = "HANDLED"        # duplicate occurrence already accounted for


class Language(Enum):
    """Languages with a bundled dictionary."""
    EN = "en"
    FR = "fr"

    @property
    def display_name(self) -> str:
        return _LANGUAGE_NAMES[self]

    @classmethod
    def from_code(cls, code: str) -> "Language":
        try:
            return cls(code.strip().lower())
        except ValueError:
            supported = ', '.join(language.value for language in cls)
            raise ValueError(f"Unsupported language '{code}'. Expected one of: {supported}") from None


_LANGUAGE_NAMES = {
    Language.EN: "English",
    Language.FR: "French",
}


class ValidationErrorKind(Enum):
    """Reasons a raw guess is rejected before scoring."""
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    WRONG_LENGTH = "WRONG_LENGTH"
    UNKNOWN_WORD = "UNKNOWN_WORD"


@dataclass(frozen=True)
class ValidationError:
    """A rejected guess. Returned as data, never raised."""
    kind: ValidationErrorKind
    message: str


@dataclass(frozen=True)
class Letter:
    """One guessed character and its classification."""
    char: str
    status: LetterStatus


@dataclass(frozen=True)
class Attempt:
    """A classified guess, one Letter per position."""
    letters: Tuple[Letter, ...]

    @property
    def word(self) -> str:
        return ''.join(letter.char for letter in self.letters)

    @property
    def is_winning(self) -> bool:
        return all(letter.status == LetterStatus.CORRECT for letter in self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Letter status as strings for JSON serialization."""
        return [(letter.char, letter.status.value) for letter in self.letters]


@dataclass
class GameSnapshot:
    """Serializable view of one game session."""
    session_id: str
    status: str  # "idle", "ongoing", "won", "lost", "errored"
    language: str
    current_round: int
    max_attempts: int
    remaining_attempts: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]
    letter_status: Dict[str, str]
    pending_input: str = ""
    last_error: Optional[str] = None
    error_kind: Optional[str] = None
    answer: Optional[str] = None  # Only included when game is over
