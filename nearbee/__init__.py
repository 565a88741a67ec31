"""
Near-anagram Spelling Bee - corpus generator and puzzle session engine.
"""

from .errors import ConfigurationError, MissingResource, PersistenceFailure
from .utils import is_near_anagram, letters_of
from .generator import generate, DictionaryTiers
from .game_loop import dispatch, initial_state, check_guess, classify_letter, LetterStatus
from .session import PuzzleSession
from .storage import MemoryStore, JsonFileStore
from .models import PuzzleDefinition

__all__ = [
    "ConfigurationError",
    "MissingResource",
    "PersistenceFailure",
    "is_near_anagram",
    "letters_of",
    "generate",
    "DictionaryTiers",
    "dispatch",
    "initial_state",
    "check_guess",
    "classify_letter",
    "LetterStatus",
    "PuzzleSession",
    "MemoryStore",
    "JsonFileStore",
    "PuzzleDefinition",
]
