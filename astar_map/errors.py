"""Fatal error types raised while preparing a map for search."""

from __future__ import annotations


class AstarMapError(Exception):
    """Base error for map loading and search setup."""


class MapLoadError(AstarMapError):
    """Raised when a map file cannot be read or its rows differ in length."""


class MissingMarker(AstarMapError, LookupError):
    """Raised when the grid has no start or no finish cell."""

    def __init__(self, marker: str, name: str) -> None:
        super().__init__(f"Unable to find {name} ('{marker}') in map")
        self.marker = marker
        self.name = name


__all__ = ["AstarMapError", "MapLoadError", "MissingMarker"]
