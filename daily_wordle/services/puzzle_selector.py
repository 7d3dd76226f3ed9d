"""
Puzzle Selector

Derives the daily target word from the calendar date. Every player gets the
same word on the same day without any coordination: the word is the entry at
``days_since_epoch(day) % len(word_list)``.
"""

from datetime import date, datetime
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config.game_settings import PUZZLE_EPOCH, validate_word_list
from ..exceptions import ConfigurationError


def days_since_epoch(day: date, epoch: date = PUZZLE_EPOCH) -> int:
    """
    Number of whole days between the epoch and ``day``.

    Raises:
        ConfigurationError: If ``day`` is before the epoch
    """
    if isinstance(day, datetime):
        day = day.date()
    offset = (day - epoch).days
    if offset < 0:
        raise ConfigurationError(
            f"Date {day.isoformat()} is before the puzzle epoch {epoch.isoformat()}"
        )
    return offset


def select_daily_word(day: date, word_list: Sequence[str], epoch: date = PUZZLE_EPOCH) -> str:
    """Returns the target word for ``day``. Pure: no I/O and no randomness."""
    words = validate_word_list(word_list)
    return words[days_since_epoch(day, epoch) % len(words)]


class PuzzleSelector:
    """
    Daily word selection bound to one word list and one notion of "today".

    The word list is validated once at construction. ``timezone`` is an IANA
    name used to decide which calendar day it is; local time is used when
    it is not set.
    """

    def __init__(self, word_list: Sequence[str], epoch: date = PUZZLE_EPOCH,
                 timezone: Optional[str] = None):
        self.word_list: List[str] = validate_word_list(word_list)
        self.epoch = epoch
        self.timezone = None
        if timezone:
            try:
                self.timezone = ZoneInfo(timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigurationError(f"Unknown puzzle timezone: {timezone}") from e

    def today(self, now: Optional[datetime] = None) -> date:
        """
        Calendar day of ``now`` (the current instant by default) in the
        configured timezone. Naive ``now`` values are taken as local time.
        """
        if now is None:
            now = datetime.now(self.timezone)
        elif self.timezone is not None:
            now = now.astimezone(self.timezone)
        return now.date()

    def word_for(self, day: date) -> str:
        return self.word_list[days_since_epoch(day, self.epoch) % len(self.word_list)]

    def puzzle_number(self, day: date) -> int:
        """1-based puzzle number shown to players."""
        return days_since_epoch(day, self.epoch) + 1

    def todays_word(self) -> str:
        return self.word_for(self.today())
