"""
Key-value stores for puzzle progress.
"""

from __future__ import annotations
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

import orjson
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .errors import PersistenceFailure

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Synchronous string-keyed, string-valued store."""

    def get(self, key: str) -> Optional[str]:
        """
        Return the value for key, or None if unset.

        Raises:
            PersistenceFailure: If the store cannot be read
        """
        ...

    def set(self, key: str, value: str) -> None:
        """
        Overwrite the value for key.

        Raises:
            PersistenceFailure: If the store cannot be written
        """
        ...


class MemoryStore:
    """In-process store, mostly for tests and throwaway sessions."""

    def __init__(self, data: Dict[str, str] | None = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    All keys in one JSON object on disk.

    Every write rewrites the whole file through a temp file in the same
    directory, so a crash never leaves a half-written store behind.
    """

    def __init__(self, path: str | Path, attempts: int = 3):
        self.path = Path(path)
        self.attempts = attempts

    def _load(self) -> Dict[str, str]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise PersistenceFailure(f"Cannot read {self.path}: {e}") from e

        if not raw.strip():
            return {}
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise PersistenceFailure(f"Corrupt progress file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceFailure(f"Progress file {self.path} is not a JSON object")
        return data

    def _write(self, data: Dict[str, str]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(orjson.dumps(data, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS))
            os.replace(tmp, self.path)
        finally:
            if os.path.exists(tmp):
                os.unlink(tmp)

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value

        @retry(
            stop=stop_after_attempt(self.attempts),
            wait=wait_exponential(multiplier=0.05, min=0.05, max=0.5),
            retry=retry_if_exception_type(OSError),
            reraise=True,
            before_sleep=lambda state: logger.debug(
                "Write to %s failed (attempt %d/%d): %r",
                self.path, state.attempt_number, self.attempts, state.outcome.exception(),
            ),
        )
        def write():
            self._write(data)

        try:
            write()
        except OSError as e:
            raise PersistenceFailure(f"Cannot write {self.path}: {e}") from e
