"""
Word list loading and validation.
"""

import pytest

from daily_wordle.config import (
    MAX_GUESSES, WORD_LENGTH, WORD_LIST, validate_word_list, validate_word_list_integrity,
)
from daily_wordle.exceptions import ConfigurationError


def test_bundled_word_list_is_valid():
    assert validate_word_list_integrity() is True
    assert all(len(word) == WORD_LENGTH for word in WORD_LIST)
    assert MAX_GUESSES == 6


def test_validate_word_list_keeps_order():
    assert validate_word_list(("PLANT", "HOMER")) == ["PLANT", "HOMER"]


def test_duplicate_words_are_rejected():
    with pytest.raises(ConfigurationError, match="HOMER"):
        validate_word_list_integrity(["HOMER", "MARGE", "HOMER"])


def test_integrity_check_runs_basic_validation():
    with pytest.raises(ConfigurationError):
        validate_word_list_integrity(["HOMER", "nuke"])
