"""
Stats Service

Reads and updates the player's cumulative stats and the per-day
"completed" flag through an injected key-value store.
"""

import logging
import threading
from datetime import date

from ..models.game import Stats
from ..storage.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class StatsService:
    """
    Stats are only changed by ``record_result``, which the session service
    calls when a game reaches a terminal state.
    """

    def __init__(self, store: KeyValueStore,
                 stats_key: str = "simpsonspedia-wordle-stats",
                 completed_key_prefix: str = "simpsonspedia-wordle-completed-"):
        self.store = store
        self.stats_key = stats_key
        self.completed_key_prefix = completed_key_prefix
        # Stats are shared by every session; updates are read-modify-write
        self._lock = threading.RLock()

    def load(self) -> Stats:
        raw = self.store.get(self.stats_key)
        if raw is None:
            return Stats()
        try:
            return Stats.from_json(raw)
        except ValueError as e:
            # Corrupted stats should never crash the game
            logger.warning("Ignoring unreadable stats under '%s': %s", self.stats_key, e)
            return Stats()

    def save(self, stats: Stats) -> None:
        self.store.set(self.stats_key, stats.to_json())

    def record_result(self, won: bool) -> Stats:
        with self._lock:
            stats = self.load().record(won)
            self.save(stats)
            return stats

    def reset(self) -> None:
        with self._lock:
            self.store.remove(self.stats_key)

    def _completed_key(self, day: date) -> str:
        return f"{self.completed_key_prefix}{day.isoformat()}"

    def has_completed(self, day: date) -> bool:
        return self.store.get(self._completed_key(day)) is not None

    def mark_completed(self, day: date) -> None:
        self.store.set(self._completed_key(day), "1")

    def record_daily_result(self, day: date, won: bool) -> bool:
        """
        Records the first completed game of ``day``. Later games that day
        are practice and leave the stats alone.

        Returns:
            bool: True if the stats were updated
        """
        with self._lock:
            if self.has_completed(day):
                return False
            self.record_result(won)
            self.mark_completed(day)
            return True
