"""
Helper Functions

Contains text utilities used throughout the application.
"""

from unidecode import unidecode


def normalize_word(text: str) -> str:
    """
    Normalize a word for comparison.

    Transliterates to ASCII (accents stripped, ``"œ"`` -> ``"oe"``), then
    lowercases and trims surrounding whitespace. The result is plain ASCII,
    so normalizing it again returns it unchanged.
    """
    return unidecode(text).lower().strip()


def is_alphabetic(text: str) -> bool:
    """True when every character is a letter. The empty string qualifies."""
    return all(char.isalpha() for char in text)
