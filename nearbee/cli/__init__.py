"""
CLI commands for generating and playing puzzles.
"""

from .generate import main as generate_puzzle
from .play import main as play_puzzle
from .explore_puzzle import puzzle_stats

__all__ = [
    "generate_puzzle",
    "play_puzzle",
    "puzzle_stats",
]
