# nearbee/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

from ..errors import ConfigurationError

KNOWN_KEYS = [
    "NEARBEE_WORDLIST_DIR",   # directory holding english-words.<level>
    "NEARBEE_PUZZLE_DIR",     # generated puzzles, incl. today.json
    "NEARBEE_STORE_PATH",     # JSON progress file
    "NEARBEE_MAX_OBSCURITY",
    "NEARBEE_MESSAGE_DELAY",
]


@dataclass(frozen=True)
class Settings:
    wordlist_dir: Path = Path("wordlists")
    puzzle_dir: Path = Path("word-lists")
    store_path: Path = Path("data/progress.json")
    max_obscurity: int = 40
    message_delay: float = 1.0

    @property
    def today_path(self) -> Path:
        return self.puzzle_dir / "today.json"


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which keys are present.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    return {k: os.environ[k] for k in KNOWN_KEYS if os.getenv(k)}


def _number(name: str, default, cast):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def get_settings() -> Settings:
    """Build settings from the environment, falling back to defaults."""
    defaults = Settings()
    return Settings(
        wordlist_dir=Path(os.getenv("NEARBEE_WORDLIST_DIR") or defaults.wordlist_dir),
        puzzle_dir=Path(os.getenv("NEARBEE_PUZZLE_DIR") or defaults.puzzle_dir),
        store_path=Path(os.getenv("NEARBEE_STORE_PATH") or defaults.store_path),
        max_obscurity=_number("NEARBEE_MAX_OBSCURITY", defaults.max_obscurity, int),
        message_delay=_number("NEARBEE_MESSAGE_DELAY", defaults.message_delay, float),
    )
