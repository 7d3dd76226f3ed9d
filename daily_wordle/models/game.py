"""
Game Data Models

Contains all game-related data structures and enums.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for a single grid cell or keyboard key."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"

    @property
    def rank(self) -> int:
        """Keyboard precedence: correct > present > absent > empty."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.EMPTY: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class LetterResult:
    letter: str
    status: LetterStatus


@dataclass(frozen=True)
class GuessRow:
    """The scored result of one submitted guess. Immutable once produced."""
    cells: Tuple[LetterResult, ...]

    @property
    def word(self) -> str:
        return "".join(cell.letter for cell in self.cells)

    @property
    def statuses(self) -> Tuple[LetterStatus, ...]:
        return tuple(cell.status for cell in self.cells)

    @property
    def is_solved(self) -> bool:
        return all(cell.status == LetterStatus.CORRECT for cell in self.cells)

    def to_list(self) -> List[Tuple[str, str]]:
        # Letter status as string for JSON serialization
        return [(cell.letter, cell.status.value) for cell in self.cells]

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


@dataclass
class Stats:
    """
    Cumulative results persisted between sessions.

    Stored as JSON using the keys the browser client has always used
    (``played``, ``won``, ``streak``, ``maxStreak``).
    """
    played: int = 0
    won: int = 0
    streak: int = 0
    max_streak: int = 0

    @property
    def win_percentage(self) -> int:
        if self.played == 0:
            return 0
        return round(self.won / self.played * 100)

    def record(self, won: bool) -> "Stats":
        """Returns the stats after one more completed game."""
        streak = self.streak + 1 if won else 0
        return Stats(
            played=self.played + 1,
            won=self.won + 1 if won else self.won,
            streak=streak,
            max_streak=max(self.max_streak, streak),
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "played": self.played,
            "won": self.won,
            "streak": self.streak,
            "maxStreak": self.max_streak,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> "Stats":
        """
        Parses a stored stats blob.

        Raises:
            ValueError: If the blob is not a JSON object of integers
        """
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Stats must be a JSON object")
        values = {
            "played": data.get("played", 0),
            "won": data.get("won", 0),
            "streak": data.get("streak", 0),
            "max_streak": data.get("maxStreak", 0),
        }
        for key, value in values.items():
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"Invalid value for stats field '{key}': {value!r}")
        return cls(**values)


@dataclass
class GameSnapshot:
    """Read-only view of one game session for rendering."""
    game_id: str
    status: str
    current_round: int
    max_guesses: int
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]
    grid: List[List[Tuple[str, str]]]
    letter_status: Dict[str, str]
    pending: str = ""
    puzzle_number: Optional[int] = None
    puzzle_date: Optional[str] = None
    answer: Optional[str] = None  # Only included when game is over
    game_over: bool = False
    won: bool = False
