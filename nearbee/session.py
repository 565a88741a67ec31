"""
PuzzleSession: a puzzle, its progress store and the live game state.
"""

from __future__ import annotations
import logging
import random
from typing import List, Optional, Tuple

from .errors import ConfigurationError, PersistenceFailure
from .game_loop import (
    DEFAULT_MESSAGE_DELAY,
    Action,
    Effect,
    PersistFoundWords,
    SessionState,
    dispatch,
    initial_state,
)
from .models import PuzzleDefinition
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


def parse_found_words(blob: Optional[str], puzzle: PuzzleDefinition) -> Tuple[str, ...]:
    """
    Turn a stored newline-joined blob back into found words.

    Blank lines, words not in the puzzle and repeats are dropped.
    """
    if not blob:
        return ()
    found: List[str] = []
    dropped = 0
    for line in blob.splitlines():
        word = line.strip()
        if not word:
            continue
        if not puzzle.contains(word) or word in found:
            dropped += 1
            continue
        found.append(word)
    if dropped:
        logger.warning("Dropped %d stored entries not valid for puzzle %s", dropped, puzzle.key)
    return tuple(found)


class PuzzleSession:
    """
    One player's game on one puzzle.

    Persistence writes are carried out here; timer effects are handed back
    to the caller of `handle`.
    """

    def __init__(
        self,
        puzzle: PuzzleDefinition,
        store: KeyValueStore,
        rng: Optional[random.Random] = None,
        message_delay: float = DEFAULT_MESSAGE_DELAY,
    ):
        if not puzzle.words:
            raise ConfigurationError(f"Puzzle {puzzle.key} has no words")
        unplayable = set(puzzle.words) - puzzle.playable_words
        if unplayable:
            logger.warning(
                "Puzzle %s has %d entries that cannot be typed: %s",
                puzzle.key, len(unplayable), ", ".join(sorted(unplayable)),
            )
        if not puzzle.playable_words:
            raise ConfigurationError(f"Puzzle {puzzle.key} has no playable words")
        self.puzzle = puzzle
        self.store = store
        self.rng = rng
        self.message_delay = message_delay

        try:
            blob = store.get(puzzle.key)
        except PersistenceFailure as e:
            logger.warning("Could not load progress for %s, starting fresh: %s", puzzle.key, e)
            blob = None
        self._state = initial_state(puzzle, parse_found_words(blob, puzzle))

    def handle(self, action: Action) -> List[Effect]:
        """
        Apply one action and perform its persistence effects.

        Returns:
            Effects left for the caller (ScheduleClearMessage timers)
        """
        self._state, effects = dispatch(
            self.puzzle, self._state, action, rng=self.rng, message_delay=self.message_delay
        )
        pending: List[Effect] = []
        for effect in effects:
            if isinstance(effect, PersistFoundWords):
                self._persist(effect)
            else:
                pending.append(effect)
        return pending

    def _persist(self, effect: PersistFoundWords):
        try:
            self.store.set(effect.key, effect.value)
        except PersistenceFailure as e:
            logger.warning("Progress for %s not saved: %s", effect.key, e)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def key(self) -> str:
        return self.puzzle.key

    @property
    def guess(self) -> str:
        return self._state.guess

    @property
    def found_words(self) -> Tuple[str, ...]:
        return self._state.found_words

    @property
    def message(self) -> Optional[str]:
        return self._state.message

    @property
    def letter_order(self) -> Tuple[str, ...]:
        return self._state.letter_order

    @property
    def found_count(self) -> int:
        return len(self._state.found_words)

    @property
    def total_words(self) -> int:
        return len(self.puzzle.playable_words)
