"""
Puzzle data types.

- PuzzleDefinition: the seven letters plus the corpus, as written by the
  generator and read by a session
- Letter sources: where the seven letters come from

Usage:
    from nearbee.models import PuzzleDefinition, BaseWordLetterSource

    center, outer = BaseWordLetterSource("g", "gamecock").letters()
    puzzle = PuzzleDefinition.load("word-lists/today.json")
"""

from .puzzle import PuzzleDefinition
from .letter_source import LetterSource, StaticLetterSource, BaseWordLetterSource

__all__ = [
    "PuzzleDefinition",
    "LetterSource",
    "StaticLetterSource",
    "BaseWordLetterSource",
]
