"""
Attempt Scorer

Validates a raw guess and classifies each of its letters against the
target word, taking care of duplicate letters.
"""

from collections import Counter
from typing import List, Union

from ..config.game_settings import WORD_LENGTH
from ..models.game import (
    Attempt, Letter, LetterStatus, ValidationError, ValidationErrorKind
)
from ..utils.helpers import is_alphabetic, normalize_word
from .dictionary import WordDictionary


def validate_guess(guess: str, dictionary: WordDictionary) -> Union[str, ValidationError]:
    """
    Normalize and validate a raw guess.

    Checks run in order and the first failure wins: non-letters, length,
    dictionary membership.

    Returns:
        The normalized guess, or the ValidationError describing the rejection
    """
    normalized = normalize_word(guess)

    if not is_alphabetic(normalized):
        return ValidationError(
            ValidationErrorKind.INVALID_CHARACTERS,
            f'"{guess}" contains characters that are not letters'
        )

    if len(normalized) != WORD_LENGTH:
        return ValidationError(
            ValidationErrorKind.WRONG_LENGTH,
            f"Guess must be exactly {WORD_LENGTH} letters"
        )

    if normalized not in dictionary:
        return ValidationError(
            ValidationErrorKind.UNKNOWN_WORD,
            f'"{normalized}" is not in the {dictionary.language.display_name} dictionary'
        )

    return normalized


def score(target: str, guess: str, dictionary: WordDictionary) -> Union[Attempt, ValidationError]:
    """
    Score a raw guess against the target word.

    Returns:
        The classified Attempt, or a ValidationError if the guess is rejected
    """
    validated = validate_guess(guess, dictionary)
    if isinstance(validated, ValidationError):
        return validated

    return Attempt(tuple(classify(normalize_word(target), validated)))


def classify(target: str, guess: str) -> List[Letter]:
    """
    Classify every letter of a normalized guess.

    Three passes, in this order:
    1. exact matches are CORRECT, letters found elsewhere in the target
       MISPLACED, the rest UNUSED;
    2. a MISPLACED letter whose target occurrences are all taken by CORRECT
       placements becomes HANDLED;
    3. left to right, a MISPLACED letter beyond what is left of its target
       occurrences (after CORRECT placements and earlier MISPLACED ones)
       becomes HANDLED.
    """
    target_counts = Counter(target)
    letters = _initial_pass(target, guess)
    letters = _resolve_correct_duplicates(letters, target_counts)
    return _resolve_misplaced_duplicates(letters, target_counts)


def _initial_pass(target: str, guess: str) -> List[Letter]:
    letters = []
    for expected, char in zip(target, guess):
        if char == expected:
            status = LetterStatus.CORRECT
        elif char in target:
            status = LetterStatus.MISPLACED
        else:
            status = LetterStatus.UNUSED
        letters.append(Letter(char, status))
    return letters


def _count_correct(letters: List[Letter]) -> Counter:
    return Counter(letter.char for letter in letters if letter.status == LetterStatus.CORRECT)


def _resolve_correct_duplicates(letters: List[Letter], target_counts: Counter) -> List[Letter]:
    correct_counts = _count_correct(letters)
    resolved = []
    for letter in letters:
        # >= on purpose: correct placements never outnumber target occurrences, so > would never fire
        if (letter.status == LetterStatus.MISPLACED
                and correct_counts[letter.char] >= target_counts[letter.char]):
            letter = Letter(letter.char, LetterStatus.HANDLED)
        resolved.append(letter)
    return resolved


def _resolve_misplaced_duplicates(letters: List[Letter], target_counts: Counter) -> List[Letter]:
    correct_counts = _count_correct(letters)
    misplaced_seen: Counter = Counter()
    resolved = []
    for letter in letters:
        if letter.status == LetterStatus.MISPLACED:
            budget = target_counts[letter.char] - correct_counts[letter.char]
            if misplaced_seen[letter.char] >= budget:
                letter = Letter(letter.char, LetterStatus.HANDLED)
            else:
                misplaced_seen[letter.char] += 1
        resolved.append(letter)
    return resolved
