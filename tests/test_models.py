"""Tests for nearbee.models."""

import pytest

from nearbee.errors import ConfigurationError
from nearbee.models import BaseWordLetterSource, PuzzleDefinition, StaticLetterSource


class TestPuzzleDefinition:
    def test_alphabet_and_key(self, quotes_puzzle):
        assert quotes_puzzle.alphabet == frozenset("topqrsu")
        assert quotes_puzzle.key == "topqrsu"

    def test_contains_is_exact(self, quotes_puzzle):
        assert quotes_puzzle.contains("quotes")
        assert not quotes_puzzle.contains("Quotes")

    @pytest.mark.parametrize(
        "center,outer",
        [
            ("tt", "opqrsu"),
            ("t", "opqrs"),
            ("t", "opqrsuv"),
            ("t", "opqrss"),
            ("t", "topqrs"),
            ("t", "opq1su"),
            ("T", "opqrsu"),
        ],
    )
    def test_malformed_letters_rejected(self, center, outer):
        with pytest.raises(ConfigurationError):
            PuzzleDefinition(center=center, outer=outer, words=())

    def test_playable_words_excludes_capitals_and_punctuation(self):
        puzzle = PuzzleDefinition("g", "amecok", ("lockage", "Lockage", "Lock-age", "lockage"))
        assert puzzle.playable_words == frozenset({"lockage"})

    def test_json_round_trip(self, quotes_puzzle, tmp_path):
        path = tmp_path / "today.json"
        quotes_puzzle.save(path)
        assert PuzzleDefinition.load(path) == quotes_puzzle

    def test_json_shape(self, quotes_puzzle):
        assert quotes_puzzle.to_dict() == {
            "center": "t",
            "outer": "opqrsu",
            "words": ["quotes", "troupes", "posture"],
        }

    def test_missing_field(self):
        with pytest.raises(ConfigurationError):
            PuzzleDefinition.from_dict({"center": "t", "outer": "opqrsu"})

    def test_words_must_be_strings(self):
        with pytest.raises(ConfigurationError):
            PuzzleDefinition.from_dict({"center": "t", "outer": "opqrsu", "words": [1]})

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError):
            PuzzleDefinition.loads(b"{")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            PuzzleDefinition.load(tmp_path / "absent.json")


class TestLetterSources:
    def test_static_lowercases(self):
        assert StaticLetterSource("T", "OPQRSU").letters() == ("t", "opqrsu")

    def test_base_word_keeps_first_appearance_order(self):
        assert BaseWordLetterSource("g", "gamecock").letters() == ("g", "amecok")

    def test_base_word_center_elsewhere(self):
        assert BaseWordLetterSource("k", "Gamecock").letters() == ("k", "gameco")

    def test_base_word_without_center(self):
        with pytest.raises(ConfigurationError):
            BaseWordLetterSource("z", "gamecock").letters()

    def test_base_word_wrong_letter_count(self):
        with pytest.raises(ConfigurationError):
            BaseWordLetterSource("g", "gamecocks").letters()
