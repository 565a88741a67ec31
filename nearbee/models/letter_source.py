from __future__ import annotations
from typing import Protocol, Tuple

from ..errors import ConfigurationError
from ..utils import unique_in_order


class LetterSource(Protocol):
    """Protocol for anything that supplies the letters of a puzzle."""

    def letters(self) -> Tuple[str, str]:
        """
        Return the puzzle letters.

        Returns:
            (center, outer) where outer is a string of 6 letters

        Raises:
            ConfigurationError: If the letters cannot form a puzzle
        """
        ...


class StaticLetterSource:
    """Letters fixed up front, e.g. typed in by hand or read from a file."""

    def __init__(self, center: str, outer: str):
        self.center = center
        self.outer = outer

    def letters(self) -> Tuple[str, str]:
        return self.center.lower(), self.outer.lower()


class BaseWordLetterSource:
    """
    Letters taken from a base word such as "gamecock".

    The base word must contain the center and use exactly 7 distinct letters.
    Outer letters keep the order of their first appearance in the word.
    """

    def __init__(self, center: str, base_word: str):
        self.center = center
        self.base_word = base_word

    def letters(self) -> Tuple[str, str]:
        center = self.center.lower()
        distinct = unique_in_order(c for c in self.base_word.lower() if c.isalpha())
        if center not in distinct:
            raise ConfigurationError(
                f"Base word {self.base_word!r} does not contain center letter {center!r}"
            )
        if len(distinct) != 7:
            raise ConfigurationError(
                f"Base word {self.base_word!r} has {len(distinct)} distinct letters, expected 7"
            )
        return center, "".join(c for c in distinct if c != center)
