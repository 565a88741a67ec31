"""
Exception types shared by the generator, the stores and the session.
"""


class NearBeeError(Exception):
    """Base class for every error raised by nearbee."""


class ConfigurationError(NearBeeError, ValueError):
    """Malformed puzzle seed, puzzle definition or setting. Fatal."""


class MissingResource(NearBeeError, FileNotFoundError):
    """A dictionary tier file does not exist."""


class PersistenceFailure(NearBeeError):
    """Reading from or writing to a progress store failed."""
