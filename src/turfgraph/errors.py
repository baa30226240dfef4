"""Exceptions raised by zone graph construction and enrichment."""

from __future__ import annotations

from typing import Iterable, Sequence


class TurfGraphError(Exception):
    """Base class for every error raised by this package."""


class DuplicateNameError(TurfGraphError):
    """Two zones in one set share a case-insensitive name."""

    def __init__(self, names: Iterable[str]):
        self.names = sorted(names)
        super().__init__(f"Duplicate zone names: {', '.join(self.names)}")


class EmptySetError(TurfGraphError):
    """A nearest-zone query was made against a set with no members."""

    def __init__(self, message: str = "Zone set has no members"):
        super().__init__(message)


class PhantomZoneError(TurfGraphError):
    """The metadata source does not recognise one or more requested zones."""

    def __init__(self, names: Iterable[str], diagnostics: Sequence | None = None):
        self.names = sorted(names)
        self.diagnostics = list(diagnostics or [])
        super().__init__(f"Zones do not exist in the Turf API: {', '.join(self.names)}")


class AlreadyEnrichedError(TurfGraphError):
    """Metadata was applied to a zone that already has a score."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Zone '{name}' already has points metadata")


class TransportError(TurfGraphError):
    """The bulk metadata request failed or returned an unusable body."""
