"""
Core game loop for a near-anagram Spelling Bee puzzle.

State is an immutable snapshot; `dispatch` applies one action and returns the
next snapshot plus the side effects the caller has to carry out.
"""

from __future__ import annotations
import random
import string
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .models import PuzzleDefinition
from .utils import missing_letters, new_letters

DEFAULT_MESSAGE_DELAY = 1.0  # seconds a rejection message stays up

ALREADY_FOUND = "Already found"
TOO_MANY_NEW_LETTERS = "Too many new letters"
NOT_IN_WORDLIST = "Not in wordlist"


# ============================================================================
# Actions and effects
# ============================================================================

@dataclass(frozen=True)
class AppendLetter:
    letter: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Shuffle:
    seed: Optional[int] = None


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class ClearMessage:
    serial: Optional[int] = None  # None clears whatever is showing


@dataclass(frozen=True)
class ToggleWordlist:
    pass


Action = Union[AppendLetter, Backspace, Shuffle, Submit, ClearMessage, ToggleWordlist]


@dataclass(frozen=True)
class PersistFoundWords:
    """Overwrite the stored progress for `key` with `value`."""
    key: str
    value: str


@dataclass(frozen=True)
class ScheduleClearMessage:
    """Dispatch ClearMessage(serial) after `delay` seconds."""
    delay: float
    serial: int


Effect = Union[PersistFoundWords, ScheduleClearMessage]


# ============================================================================
# State
# ============================================================================

@dataclass(frozen=True)
class SessionState:
    letter_order: Tuple[str, ...]
    found_words: Tuple[str, ...] = ()
    guess: str = ""
    message: Optional[str] = None
    message_serial: int = 0
    wordlist_visible: bool = False


def initial_state(puzzle: PuzzleDefinition, found_words: Tuple[str, ...] = ()) -> SessionState:
    """Fresh state for a puzzle, seeded with previously found words."""
    return SessionState(letter_order=tuple(puzzle.outer), found_words=tuple(found_words))


# ============================================================================
# Validation
# ============================================================================

class RejectionKind(str, Enum):
    TOO_MANY_NEW_LETTERS = "too_many_new_letters"
    MISSING_LETTERS = "missing_letters"
    NOT_IN_WORDLIST = "not_in_wordlist"
    ALREADY_FOUND = "already_found"


@dataclass(frozen=True)
class ValidationRejection:
    """Why a submitted guess was refused, with the text shown to the player."""
    kind: RejectionKind
    message: str


def check_guess(
    puzzle: PuzzleDefinition,
    guess: str,
    found_words: Tuple[str, ...] = (),
) -> Optional[ValidationRejection]:
    """
    Decide whether a guess can be accepted.

    A listed word is accepted unless already found. For an unlisted guess the
    reason is chosen in order: more than one letter outside the puzzle, more
    than one puzzle letter unused, otherwise not in the word list.

    Returns:
        None when the guess is accepted, else the rejection
    """
    if puzzle.contains(guess):
        if guess in found_words:
            return ValidationRejection(RejectionKind.ALREADY_FOUND, ALREADY_FOUND)
        return None

    alphabet = puzzle.alphabet
    if len(new_letters(guess, alphabet)) > 1:
        return ValidationRejection(RejectionKind.TOO_MANY_NEW_LETTERS, TOO_MANY_NEW_LETTERS)

    missing = missing_letters(guess, alphabet)
    if len(missing) > 1:
        return ValidationRejection(
            RejectionKind.MISSING_LETTERS,
            f"All letters except one must be included. Missing: {', '.join(sorted(missing))}",
        )

    return ValidationRejection(RejectionKind.NOT_IN_WORDLIST, NOT_IN_WORDLIST)


# ============================================================================
# Letter status
# ============================================================================

class LetterStatus(str, Enum):
    IN_GRID = "in_grid"
    PURPLE = "purple"
    DISABLED = "disabled"
    NORMAL = "normal"


def extra_letters(puzzle: PuzzleDefinition, guess: str) -> List[str]:
    """Distinct guess letters outside the puzzle alphabet, in typing order."""
    alphabet = puzzle.alphabet
    extras: List[str] = []
    for c in guess:
        if c not in alphabet and c not in extras:
            extras.append(c)
    return extras


def classify_letter(puzzle: PuzzleDefinition, guess: str, letter: str) -> LetterStatus:
    """
    Classify a keyboard letter against the guess typed so far.

    Only one letter outside the grid is tolerated per guess: once it is
    typed it shows purple and every other outside letter is disabled.
    """
    letter = letter.lower()
    if letter in puzzle.alphabet:
        return LetterStatus.IN_GRID

    extras = extra_letters(puzzle, guess)
    if len(extras) == 1 and extras[0] == letter:
        return LetterStatus.PURPLE
    if any(e != letter for e in extras):
        return LetterStatus.DISABLED
    return LetterStatus.NORMAL


def letter_statuses(puzzle: PuzzleDefinition, guess: str) -> Dict[str, LetterStatus]:
    """Status of every letter a-z for the current guess."""
    return {c: classify_letter(puzzle, guess, c) for c in string.ascii_lowercase}


# ============================================================================
# Dispatch
# ============================================================================

def action_for_key(key: str) -> Optional[Action]:
    """Map a key name to an action; unknown keys map to None."""
    if key == " ":
        return Shuffle()
    if key == "Backspace":
        return Backspace()
    if key == "Enter":
        return Submit()
    if len(key) == 1:
        return AppendLetter(key)
    return None


def _submit(
    puzzle: PuzzleDefinition,
    state: SessionState,
    message_delay: float,
) -> Tuple[SessionState, List[Effect]]:
    guess = state.guess
    rejection = check_guess(puzzle, guess, state.found_words)

    if rejection is None:
        found = state.found_words + (guess,)
        new_state = replace(state, found_words=found, guess="", message=None)
        return new_state, [PersistFoundWords(puzzle.key, "\n".join(found))]

    serial = state.message_serial + 1
    new_state = replace(state, guess="", message=rejection.message, message_serial=serial)
    return new_state, [ScheduleClearMessage(message_delay, serial)]


def dispatch(
    puzzle: PuzzleDefinition,
    state: SessionState,
    action: Action,
    rng: Optional[random.Random] = None,
    message_delay: float = DEFAULT_MESSAGE_DELAY,
) -> Tuple[SessionState, List[Effect]]:
    """
    Apply one player action.

    Args:
        puzzle: The puzzle being played
        state: Current state snapshot
        action: The action to apply
        rng: Random source for Shuffle when the action carries no seed
        message_delay: Seconds before a rejection message should clear

    Returns:
        (new_state, effects) where effects are PersistFoundWords and
        ScheduleClearMessage descriptors for the caller to execute
    """
    if isinstance(action, AppendLetter):
        return replace(state, guess=state.guess + action.letter.lower()), []

    if isinstance(action, Backspace):
        return replace(state, guess=state.guess[:-1]), []

    if isinstance(action, Shuffle):
        if action.seed is not None:
            rng = random.Random(action.seed)
        order = list(state.letter_order)
        (rng or random).shuffle(order)
        return replace(state, letter_order=tuple(order)), []

    if isinstance(action, Submit):
        return _submit(puzzle, state, message_delay)

    if isinstance(action, ClearMessage):
        if action.serial is not None and action.serial != state.message_serial:
            return state, []  # superseded by a newer message
        return replace(state, message=None), []

    if isinstance(action, ToggleWordlist):
        return replace(state, wordlist_visible=not state.wordlist_visible), []

    raise TypeError(f"Unknown action: {action!r}")
