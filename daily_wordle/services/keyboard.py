"""
Keyboard Input

Turns single key tokens (on-screen keyboard clicks or physical key presses)
into edits of the pending guess and submissions to a GuessEngine.
"""

from typing import Optional

from ..config.game_settings import ALPHABET, WORD_LENGTH
from ..exceptions import GameAlreadyOver
from ..models.game import GuessRow
from .guess_engine import GuessEngine

SUBMIT_KEYS = frozenset({"ENTER"})
DELETE_KEYS = frozenset({"BACKSPACE", "DELETE", "⌫"})


class KeyboardInput:
    """Pending-guess buffer in front of one GuessEngine."""

    def __init__(self, engine: GuessEngine):
        self.engine = engine
        self.pending = ""

    def press(self, token: str) -> Optional[GuessRow]:
        """
        Applies one key token.

        Letters are appended while fewer than WORD_LENGTH are pending,
        ENTER submits the pending guess and BACKSPACE / DELETE / ⌫ drop the
        last letter. Other tokens are ignored.

        Returns:
            GuessRow if the token submitted a guess, otherwise None

        Raises:
            GameAlreadyOver: For any token once the game is won or lost
            GuessError: If ENTER submits an invalid guess; the pending
                letters are kept so the player can fix them
        """
        if self.engine.is_over:
            raise GameAlreadyOver(f"Game is already over ({self.engine.status.value})")

        key = token.upper() if isinstance(token, str) else ""

        if key in SUBMIT_KEYS:
            row = self.engine.submit_guess(self.pending)
            self.pending = ""
            return row

        if key in DELETE_KEYS:
            self.pending = self.pending[:-1]
        elif len(key) == 1 and key in ALPHABET and len(self.pending) < WORD_LENGTH:
            self.pending += key
        return None

    def clear(self) -> None:
        self.pending = ""
