"""
Dictionary Service

Loads the per-language word lists the game picks targets from and
validates guesses against.
"""

import json
from functools import lru_cache
from typing import Iterable, Iterator, List

from ..config.game_settings import WORD_LENGTH, validate_word_list_integrity, word_list_path
from ..models.game import Language
from ..utils.helpers import is_alphabetic, normalize_word


class WordDictionary:
    """
    Ordered, duplicate-free list of normalized words for one language.

    Supports membership tests, ``len`` and index access (used for random
    target selection).
    """

    def __init__(self, language: Language, words: Iterable[str]):
        self.language = language
        self._words: List[str] = []
        seen = set()
        for raw in words:
            word = normalize_word(raw)
            if len(word) != WORD_LENGTH or not is_alphabetic(word):
                continue
            if word in seen:
                continue
            seen.add(word)
            self._words.append(word)
        self._lookup = frozenset(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordDictionary({self.language.value!r}, {len(self)} words)"

    @property
    def words(self) -> List[str]:
        return list(self._words)


def _read_word_file(path: str) -> List[str]:
    """
    Read a JSON array of words.

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the file does not hold a JSON array of strings
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not all(isinstance(word, str) for word in word_list):
        raise ValueError("Word list entries must be strings")

    return word_list


@lru_cache(maxsize=None)
def load_dictionary(language: Language) -> WordDictionary:
    """
    Load (once) the bundled dictionary for a language.

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the file is malformed or holds no usable word
    """
    dictionary = WordDictionary(language, _read_word_file(word_list_path(language.value)))
    validate_word_list_integrity(dictionary.words)
    return dictionary
