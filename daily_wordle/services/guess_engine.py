"""
Guess Engine

Scores guesses against a target word and drives the playing -> won / lost
lifecycle of one game.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import ALPHABET, MAX_GUESSES, WORD_LENGTH, validate_word_list
from ..exceptions import GameAlreadyOver, InvalidCharacter, InvalidGuessLength
from ..models.game import GameStatus, GuessRow, LetterResult, LetterStatus

logger = logging.getLogger(__name__)

SHARE_GLYPHS: Dict[LetterStatus, str] = {
    LetterStatus.CORRECT: "🟩",
    LetterStatus.PRESENT: "🟨",
    LetterStatus.ABSENT: "⬛",
}


def evaluate_guess(target: str, guess: str) -> GuessRow:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches claim their target position first; only then are the
    remaining guess letters matched, left to right, against target
    positions nobody has claimed yet. A letter is never reported more times
    than it occurs in the target.
    """
    if len(target) != len(guess):
        raise InvalidGuessLength(
            f"Guess must be exactly {len(target)} letters, got {len(guess)}"
        )

    statuses: List[Optional[LetterStatus]] = [None] * len(guess)
    claimed = [False] * len(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            statuses[i] = LetterStatus.CORRECT
            claimed[i] = True

    # Second pass: letters present at an unclaimed position
    for i, letter in enumerate(guess):
        if statuses[i] is not None:
            continue
        for j, target_letter in enumerate(target):
            if not claimed[j] and target_letter == letter:
                statuses[i] = LetterStatus.PRESENT
                claimed[j] = True
                break
        else:
            statuses[i] = LetterStatus.ABSENT

    return GuessRow(tuple(LetterResult(letter, status) for letter, status in zip(guess, statuses)))


def normalize_guess(candidate: str) -> str:
    """Strips and upper-cases a raw guess. Non-strings are rejected."""
    if not isinstance(candidate, str):
        raise InvalidCharacter("Guess must be a string of letters")
    return candidate.strip().upper()


class GuessEngine:
    """
    One game against one target word.

    Keeps the guess history (at most ``max_guesses`` rows), the best status
    seen per letter for the on-screen keyboard, and the game status.
    Every operation either fully applies or raises without touching state.
    """

    def __init__(self, target: str, max_guesses: int = MAX_GUESSES):
        self._target = validate_word_list([target])[0]
        self.max_guesses = max_guesses
        self._history: List[GuessRow] = []
        self._keyboard: Dict[str, LetterStatus] = {}
        self._status = GameStatus.PLAYING

    @property
    def target(self) -> str:
        return self._target

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def history(self) -> Tuple[GuessRow, ...]:
        return tuple(self._history)

    @property
    def keyboard_status(self) -> Dict[str, LetterStatus]:
        """Best status per letter guessed so far. Unseen letters are absent from the map."""
        return dict(self._keyboard)

    @property
    def is_over(self) -> bool:
        return self._status != GameStatus.PLAYING

    @property
    def won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def attempts_used(self) -> int:
        return len(self._history)

    @property
    def attempts_left(self) -> int:
        return self.max_guesses - len(self._history)

    def validate(self, candidate: str) -> str:
        """
        Checks a guess without scoring it.

        Returns:
            str: The normalized guess

        Raises:
            GameAlreadyOver: If the game is won or lost
            InvalidGuessLength: If the guess is not WORD_LENGTH letters
            InvalidCharacter: If the guess holds anything but A-Z
        """
        if self.is_over:
            raise GameAlreadyOver(f"Game is already over ({self._status.value})")

        guess = normalize_guess(candidate)
        if len(guess) != WORD_LENGTH:
            raise InvalidGuessLength(f"Guess must be exactly {WORD_LENGTH} letters")
        if any(char not in ALPHABET for char in guess):
            raise InvalidCharacter("Guess must contain only letters A-Z")
        return guess

    def submit_guess(self, candidate: str) -> GuessRow:
        """
        Scores one guess and records it.

        Args:
            candidate: The guess, case-insensitive

        Returns:
            GuessRow: The scored row, already appended to the history
        """
        guess = self.validate(candidate)
        row = evaluate_guess(self._target, guess)

        self._history.append(row)
        self._update_keyboard(row)

        if row.is_solved:
            self._status = GameStatus.WON
        elif len(self._history) >= self.max_guesses:
            self._status = GameStatus.LOST

        logger.debug("Round %d scored, status=%s", len(self._history), self._status.value)
        return row

    def _update_keyboard(self, row: GuessRow) -> None:
        # Status can only progress in priority order
        for cell in row:
            current = self._keyboard.get(cell.letter, LetterStatus.EMPTY)
            if cell.status.rank > current.rank:
                self._keyboard[cell.letter] = cell.status

    def reset(self) -> None:
        """Practice replay: clears history and keyboard, keeps the target."""
        self._history = []
        self._keyboard = {}
        self._status = GameStatus.PLAYING

    def encode_share_summary(self) -> str:
        """Glyph grid of the history, one line per row. Never includes letters."""
        return "\n".join(
            "".join(SHARE_GLYPHS[status] for status in row.statuses)
            for row in self._history
        )

    def share_text(self, title: str) -> str:
        return f"{title}\n{len(self._history)}/{self.max_guesses}\n\n{self.encode_share_summary()}"

    def letter_status(self) -> Dict[str, str]:
        """Status of every key A-Z, ``empty`` for letters not guessed yet."""
        return {
            letter: self._keyboard.get(letter, LetterStatus.EMPTY).value
            for letter in ALPHABET
        }

    def grid(self, pending: str = "") -> List[List[Tuple[str, str]]]:
        """
        Full board as plain data: scored rows, then the row being typed
        (while playing), then empty rows up to ``max_guesses``.
        """
        rows = [row.to_list() for row in self._history]
        if not self.is_over and len(rows) < self.max_guesses:
            typed = pending[:WORD_LENGTH]
            rows.append([
                (typed[i] if i < len(typed) else "", LetterStatus.EMPTY.value)
                for i in range(WORD_LENGTH)
            ])
        while len(rows) < self.max_guesses:
            rows.append([("", LetterStatus.EMPTY.value)] * WORD_LENGTH)
        return rows
