"""
Daily word selection: same word all day, cycling through the list in order.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from daily_wordle.config import WORD_LIST
from daily_wordle.exceptions import ConfigurationError
from daily_wordle.services.puzzle_selector import (
    PuzzleSelector, days_since_epoch, select_daily_word,
)

WORDS = ["AAAAA", "BBBBB", "CCCCC"]
EPOCH = date(2024, 1, 1)


def test_days_since_epoch():
    assert days_since_epoch(EPOCH) == 0
    assert days_since_epoch(date(2024, 1, 2)) == 1
    assert days_since_epoch(date(2025, 1, 1)) == 366  # 2024 is a leap year


def test_datetime_counts_as_its_calendar_day():
    assert days_since_epoch(datetime(2024, 1, 2, 23, 59)) == 1


def test_word_follows_list_order():
    assert select_daily_word(EPOCH, WORDS) == "AAAAA"
    assert select_daily_word(date(2024, 1, 2), WORDS) == "BBBBB"
    assert select_daily_word(date(2024, 1, 3), WORDS) == "CCCCC"
    assert select_daily_word(date(2024, 1, 4), WORDS) == "AAAAA"


def test_same_day_same_word():
    selector = PuzzleSelector(WORDS)
    day = date(2026, 10, 19)
    assert {selector.word_for(day) for _ in range(10)} == {selector.word_for(day)}


def test_rotation_is_cyclic():
    selector = PuzzleSelector(WORD_LIST)
    day = date(2025, 3, 14)
    assert selector.word_for(day + timedelta(days=len(WORD_LIST))) == selector.word_for(day)


def test_bundled_word_list_starts_at_epoch():
    assert select_daily_word(EPOCH, WORD_LIST) == "HOMER"
    assert select_daily_word(EPOCH + timedelta(days=len(WORD_LIST)), WORD_LIST) == "HOMER"


def test_puzzle_number_is_one_based():
    selector = PuzzleSelector(WORDS)
    assert selector.puzzle_number(EPOCH) == 1
    assert selector.puzzle_number(date(2024, 1, 31)) == 31


def test_dates_before_epoch_are_rejected():
    selector = PuzzleSelector(WORDS)
    with pytest.raises(ConfigurationError):
        selector.word_for(date(2023, 12, 31))


def test_todays_word_matches_word_for_today():
    selector = PuzzleSelector(WORDS)
    assert selector.todays_word() == selector.word_for(selector.today())


@pytest.mark.parametrize("words", [
    [],
    ["ABCD"],
    ["HOMER", "MARGEE"],
    ["homer"],
    ["HOM3R"],
])
def test_bad_word_lists_are_configuration_errors(words):
    with pytest.raises(ConfigurationError):
        PuzzleSelector(words)
    with pytest.raises(ConfigurationError):
        select_daily_word(EPOCH, words)


def test_unknown_timezone_is_configuration_error():
    with pytest.raises(ConfigurationError):
        PuzzleSelector(WORDS, timezone="Not/AZone")


def test_today_follows_configured_timezone():
    noon_utc = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    ahead = PuzzleSelector(WORDS, timezone="Pacific/Kiritimati")  # UTC+14
    behind = PuzzleSelector(WORDS, timezone="Etc/GMT+12")  # UTC-12

    assert ahead.today(noon_utc) == date(2026, 10, 20)
    assert behind.today(noon_utc) == date(2026, 10, 19)
    assert ahead.word_for(ahead.today(noon_utc)) != behind.word_for(behind.today(noon_utc))


def test_day_changes_at_local_midnight():
    selector = PuzzleSelector(WORDS, timezone="Etc/GMT+12")
    before = datetime(2026, 10, 20, 11, 59, tzinfo=timezone.utc)
    after = datetime(2026, 10, 20, 12, 0, tzinfo=timezone.utc)

    assert selector.today(before) == date(2026, 10, 19)
    assert selector.today(after) == date(2026, 10, 20)
