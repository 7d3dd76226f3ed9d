"""
Game Service

Session layer around the puzzle core: creates daily games, routes guesses and
key presses into them, and records stats when a game ends.
"""

import logging
import threading
import uuid
from datetime import date
from typing import Dict, Optional

from ..config import WORD_LIST, Config
from ..config.game_settings import MAX_GUESSES
from ..exceptions import ConfigurationError, GameNotFound
from ..models.game import GameSnapshot, Stats
from ..storage import create_store
from .guess_engine import GuessEngine
from .keyboard import KeyboardInput
from .puzzle_selector import PuzzleSelector
from .stats_service import StatsService

logger = logging.getLogger(__name__)


class GameSession:
    """One player's game of one day's puzzle."""

    def __init__(self, game_id: str, day: date, puzzle_number: int, engine: GuessEngine):
        self.game_id = game_id
        self.day = day
        self.puzzle_number = puzzle_number
        self.engine = engine
        self.keyboard = KeyboardInput(engine)
        # Scoring is not reentrant: one request at a time per session
        self.lock = threading.Lock()


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Daily word selection (the answer never leaves the server mid-game)
    - Routing guesses and key presses to each session's engine
    - Stats updates when a session reaches won or lost
    """

    def __init__(self, selector: PuzzleSelector, stats_service: StatsService,
                 max_guesses: int = MAX_GUESSES, share_title: str = "Simpsonspedia Wordle"):
        self.selector = selector
        self.stats_service = stats_service
        if not 1 <= max_guesses <= MAX_GUESSES:
            raise ConfigurationError(
                f"max_guesses must be between 1 and {MAX_GUESSES}, got {max_guesses}"
            )
        self.max_guesses = max_guesses
        self.share_title = share_title
        self.games: Dict[str, GameSession] = {}
        self._games_lock = threading.Lock()

    def create_new_game(self, day: Optional[date] = None) -> str:
        """
        Creates a new session for the puzzle of ``day`` (today by default).

        Returns:
            str: Unique game ID for this session
        """
        day = day or self.selector.today()
        engine = GuessEngine(self.selector.word_for(day), self.max_guesses)
        game_id = str(uuid.uuid4())
        session = GameSession(game_id, day, self.selector.puzzle_number(day), engine)

        with self._games_lock:
            self.games[game_id] = session

        logger.debug("Created game %s for puzzle #%d", game_id, session.puzzle_number)
        return game_id

    def _get_session(self, game_id: str) -> GameSession:
        with self._games_lock:
            session = self.games.get(game_id)
        if session is None:
            raise GameNotFound(f"Game not found: {game_id}")
        return session

    def _snapshot(self, session: GameSession) -> GameSnapshot:
        engine = session.engine
        return GameSnapshot(
            game_id=session.game_id,
            status=engine.status.value,
            current_round=engine.attempts_used,
            max_guesses=engine.max_guesses,
            guesses=[row.word for row in engine.history],
            guess_results=[row.to_list() for row in engine.history],
            grid=engine.grid(session.keyboard.pending),
            letter_status=engine.letter_status(),
            pending=session.keyboard.pending,
            puzzle_number=session.puzzle_number,
            puzzle_date=session.day.isoformat(),
            answer=engine.target if engine.is_over else None,
            game_over=engine.is_over,
            won=engine.won,
        )

    def _finish_if_over(self, session: GameSession, was_over: bool) -> None:
        if was_over or not session.engine.is_over:
            return
        recorded = self.stats_service.record_daily_result(session.day, session.engine.won)
        if recorded:
            logger.info("Recorded %s for puzzle #%d",
                        session.engine.status.value, session.puzzle_number)
        else:
            logger.info("Practice game %s finished, stats unchanged", session.game_id)

    def get_game_state(self, game_id: str) -> GameSnapshot:
        """
        Returns the current state for a session (without revealing the
        answer until the game is over).

        Raises:
            GameNotFound: If no session has this id
        """
        session = self._get_session(game_id)
        with session.lock:
            return self._snapshot(session)

    def make_guess(self, game_id: str, guess: str) -> GameSnapshot:
        """
        Submits a whole word, bypassing the pending-letter buffer.

        Raises:
            GameNotFound: If no session has this id
            GuessError: If the guess is rejected; the session is unchanged
        """
        session = self._get_session(game_id)
        with session.lock:
            was_over = session.engine.is_over
            session.engine.submit_guess(guess)
            session.keyboard.clear()
            self._finish_if_over(session, was_over)
            return self._snapshot(session)

    def press_key(self, game_id: str, key: str) -> GameSnapshot:
        """
        Applies one keyboard token (letter, ENTER, BACKSPACE).

        Raises:
            GameNotFound: If no session has this id
            GuessError: If ENTER submits an invalid guess, or the game is over
        """
        session = self._get_session(game_id)
        with session.lock:
            was_over = session.engine.is_over
            session.keyboard.press(key)
            self._finish_if_over(session, was_over)
            return self._snapshot(session)

    def reset_game(self, game_id: str) -> GameSnapshot:
        """Practice replay of the same puzzle."""
        session = self._get_session(game_id)
        with session.lock:
            session.engine.reset()
            session.keyboard.clear()
            return self._snapshot(session)

    def get_share_text(self, game_id: str) -> str:
        session = self._get_session(game_id)
        with session.lock:
            return session.engine.share_text(self.share_title)

    def get_stats(self) -> Stats:
        return self.stats_service.load()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._games_lock:
            return self.games.pop(game_id, None) is not None

    def active_games(self) -> int:
        with self._games_lock:
            return len(self.games)


# Global service instance
_game_service: Optional[GameService] = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=None, store=None) -> GameService:
    """
    Initialize the global game service instance.

    Args:
        config_class: Config class to read settings from (defaults to Config)
        store: Key-value store to use instead of the configured backend
    """
    global _game_service
    config_class = config_class or Config
    selector = PuzzleSelector(WORD_LIST, timezone=getattr(config_class, 'PUZZLE_TIMEZONE', None))
    stats_service = StatsService(
        store if store is not None else create_store(config_class),
        stats_key=config_class.STATS_KEY,
        completed_key_prefix=config_class.COMPLETED_KEY_PREFIX,
    )
    _game_service = GameService(
        selector,
        stats_service,
        max_guesses=config_class.MAX_GUESSES,
        share_title=config_class.SHARE_TITLE,
    )
    return _game_service
