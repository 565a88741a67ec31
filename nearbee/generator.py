"""
Corpus generation: find every dictionary word one letter swap away from a
puzzle alphabet.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from .errors import ConfigurationError, MissingResource
from .models import PuzzleDefinition
from .utils import is_near_anagram, letters_of, unique_in_order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DictionaryTiers:
    """Word lists partitioned by obscurity, one file per level (SCOWL layout)."""
    directory: Path = Path("wordlists")
    floor: int = 10
    step: int = 5
    pattern: str = "english-words.{level}"

    def levels(self, max_obscurity: int) -> range:
        """Levels from the floor up to max_obscurity inclusive."""
        return range(self.floor, max_obscurity + 1, self.step)

    def path_for(self, level: int) -> Path:
        return Path(self.directory) / self.pattern.format(level=level)

    def read(self, level: int) -> List[str]:
        """
        Read the words of one level.

        Raises:
            MissingResource: If the level has no file or it cannot be read
        """
        path = self.path_for(level)
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                return [line.strip() for line in f]
        except FileNotFoundError as e:
            raise MissingResource(f"No word list for level {level} at {path}") from e
        except OSError as e:
            raise MissingResource(f"Cannot read word list for level {level} at {path}: {e}") from e


def check_seed(center: str, outer_letters: Iterable[str]) -> Tuple[str, str]:
    """
    Normalize and validate the seven puzzle letters.

    Returns:
        (center, outer) lowercased, outer de-duplicated in given order

    Raises:
        ConfigurationError: If the letters cannot form a puzzle
    """
    if not (isinstance(center, str) and len(center) == 1 and center.isalpha()):
        raise ConfigurationError(f"Center must be a single letter, got {center!r}")
    center = center.lower()
    outer = unique_in_order(c.lower() for c in outer_letters)
    if center in outer:
        raise ConfigurationError(f"Outer letters must not contain the center {center!r}")
    if len(outer) != 6 or not all(len(c) == 1 and c.isalpha() for c in outer):
        raise ConfigurationError(f"Expected 6 distinct outer letters, got {''.join(outer)!r}")
    return center, "".join(outer)


def scan_words(words: Iterable[str], alphabet: Iterable[str]) -> Iterator[str]:
    """Yield the words whose letter set is one substitution from the alphabet."""
    alphabet = frozenset(alphabet)
    for word in words:
        if word and is_near_anagram(alphabet, letters_of(word)):
            yield word


def generate(
    center: str,
    outer_letters: Iterable[str],
    tiers: DictionaryTiers,
    max_obscurity: int = 40,
    dedupe: bool = False,
) -> PuzzleDefinition:
    """
    Build the puzzle definition for a set of seven letters.

    Args:
        center: The center letter
        outer_letters: The 6 other letters, in display order
        tiers: Where the dictionary levels live
        max_obscurity: Highest level to scan
        dedupe: Drop words repeated across levels (first occurrence wins)

    Returns:
        PuzzleDefinition with qualifying words in scan order

    Raises:
        ConfigurationError: If the letters cannot form a puzzle
    """
    center, outer = check_seed(center, outer_letters)
    alphabet = set(outer) | {center}

    words: List[str] = []
    for level in tiers.levels(max_obscurity):
        try:
            entries = tiers.read(level)
        except MissingResource as e:
            if isinstance(e.__cause__, FileNotFoundError):
                logger.debug("Skipping level %d: %s", level, e)
            else:
                logger.warning("Skipping level %d: %s", level, e)
            continue

        logger.info("Level: %d", level)
        for word in scan_words(entries, alphabet):
            logger.debug("%s", word)
            words.append(word)

    if dedupe:
        words = unique_in_order(words)
    if not words:
        logger.warning("No words found for %s/%s up to level %d", center, outer, max_obscurity)

    return PuzzleDefinition(center=center, outer=outer, words=tuple(words))
