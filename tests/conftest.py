"""Shared fixtures for the nearbee test suite."""

import pytest

from nearbee.generator import DictionaryTiers
from nearbee.models import PuzzleDefinition
from nearbee.storage import MemoryStore


@pytest.fixture
def gamecock_tiers(tmp_path):
    """Word-list levels for the gamecock alphabet; level 15 is missing."""
    root = tmp_path / "wordlists"
    root.mkdir()
    (root / "english-words.10").write_text("lockage\nbloop\ngamecock\n")
    (root / "english-words.20").write_text("comaker\nlockage\n  Lock-age  \ncockade\n")
    (root / "english-words.50").write_text("megapack\nlockage\n")
    return DictionaryTiers(directory=root)


@pytest.fixture
def quotes_puzzle():
    return PuzzleDefinition(center="t", outer="opqrsu", words=("quotes", "troupes", "posture"))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def puzzle_file(tmp_path, quotes_puzzle):
    path = tmp_path / "word-lists" / "today.json"
    quotes_puzzle.save(path)
    return path
