"""
Game Configuration Constants Module

Game rules for the daily puzzle. All game parameters are centralized here;
the word list itself lives in words.json next to this module.
"""

import json
import os
import string
from datetime import date
from typing import Final, Iterable, List, Optional

from ..exceptions import ConfigurationError

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
"""

WORD_LENGTH: Final[int] = 5

PUZZLE_EPOCH: Final[date] = date(2024, 1, 1)
"""
Day zero of the puzzle rotation. Puzzle #1 is played on this date.
"""

ALPHABET: Final[str] = string.ascii_uppercase


def validate_word_list(words: Iterable[str]) -> List[str]:
    """
    Checks that a word list can drive the daily rotation.

    Args:
        words: Candidate word list, in rotation order

    Returns:
        List[str]: The words as a list, order preserved

    Raises:
        ConfigurationError: If the list is empty or an entry is not
            WORD_LENGTH uppercase letters A-Z
    """
    word_list = list(words)
    if not word_list:
        raise ConfigurationError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if not isinstance(word, str) or len(word) != WORD_LENGTH:
            raise ConfigurationError(
                f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long"
            )
        if any(char not in ALPHABET for char in word):
            raise ConfigurationError(
                f"Word at index {index} '{word}' must contain only uppercase letters A-Z"
            )

    return word_list


def _load_word_list() -> List[str]:
    """
    Load word list from words.json.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        ConfigurationError: If the file is missing, malformed, or holds
            invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Word list file not found: {json_file_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ConfigurationError("JSON file must contain an array of words")

    return validate_word_list(word_list)


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(words: Optional[Iterable[str]] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    On top of validate_word_list, duplicates are rejected here: a repeated
    entry would make the same word come up twice per rotation.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ConfigurationError: If any validation check fails
    """
    word_list = validate_word_list(WORD_LIST if words is None else words)

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ConfigurationError(f"Duplicate words found in word list: {duplicates}")

    return True
