from __future__ import annotations
from pathlib import Path


class LocaleSetupError(Exception):
    """ Base class for errors raised by localesetup. """


class SourceReadError(LocaleSetupError):
    """
    A locale source exists but could not be read or parsed.
    Callers log it and treat the source as empty.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ResourceExhaustedError(LocaleSetupError, MemoryError):
    """ Out of memory while building the new environment table. """


class ConfigError(LocaleSetupError):
    pass
