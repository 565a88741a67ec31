from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Tuple

import orjson

from ..errors import ConfigurationError
from ..utils import puzzle_key


@dataclass(frozen=True)
class PuzzleDefinition:
    """A generated puzzle: seven letters and the words that solve it."""
    center: str                  # single lowercase letter
    outer: str                   # 6 distinct lowercase letters, generation order
    words: Tuple[str, ...]       # corpus in dictionary scan order
    _word_set: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not (isinstance(self.center, str) and len(self.center) == 1 and self.center.isalpha()):
            raise ConfigurationError(f"Center must be a single letter, got {self.center!r}")
        if not isinstance(self.outer, str) or len(self.outer) != 6 or len(set(self.outer)) != 6:
            raise ConfigurationError(f"Outer letters must be 6 distinct letters, got {self.outer!r}")
        if not self.outer.isalpha():
            raise ConfigurationError(f"Outer letters must be alphabetic, got {self.outer!r}")
        if self.center in self.outer:
            raise ConfigurationError(f"Center {self.center!r} repeated in outer letters {self.outer!r}")
        if self.center != self.center.lower() or self.outer != self.outer.lower():
            raise ConfigurationError("Puzzle letters must be lowercase")
        object.__setattr__(self, "words", tuple(self.words))
        object.__setattr__(self, "_word_set", frozenset(self.words))

    @property
    def alphabet(self) -> FrozenSet[str]:
        return frozenset(self.outer) | {self.center}

    @property
    def key(self) -> str:
        """Progress-store key; uses the generation order, never a shuffled one."""
        return puzzle_key(self.center, self.outer)

    def contains(self, word: str) -> bool:
        return word in self._word_set

    @property
    def playable_words(self) -> FrozenSet[str]:
        """Distinct words a player can type: lowercase letters only."""
        return frozenset(w for w in self._word_set if w.isalpha() and w == w.lower())

    def to_dict(self) -> Dict[str, Any]:
        return {"center": self.center, "outer": self.outer, "words": list(self.words)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleDefinition":
        """
        Build a definition from its JSON form.

        Raises:
            ConfigurationError: If a field is missing or has the wrong type
        """
        try:
            center, outer, words = data["center"], data["outer"], data["words"]
        except (KeyError, TypeError) as e:
            raise ConfigurationError(f"Puzzle definition is missing a field: {e}") from e
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ConfigurationError("Puzzle words must be a list of strings")
        return cls(center=center, outer=outer, words=tuple(words))

    def dumps(self) -> bytes:
        return orjson.dumps(self.to_dict())

    @classmethod
    def loads(cls, raw: bytes | str) -> "PuzzleDefinition":
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise ConfigurationError(f"Puzzle definition is not valid JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: str | Path) -> "PuzzleDefinition":
        """Load puzzle definition from a JSON file."""
        try:
            raw = Path(path).read_bytes()
        except FileNotFoundError as e:
            raise ConfigurationError(f"No puzzle definition at {path}") from e
        return cls.loads(raw)

    def save(self, path: str | Path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.dumps() + b"\n")
