"""
Errors raised while parsing a region map.

Every fatal error carries a ``kind`` string, the 1-based line number of the
offending input line (when there is one) and the offending key or text.
"""

from typing import Optional


class RegionMapError(Exception):
    """Base class for region map failures."""


class RegionMapFormatError(RegionMapError, ValueError):
    """The map file contains data that cannot be turned into regions."""

    kind = "format"

    def __init__(self, message: str, line: Optional[int] = None, key: Optional[str] = None):
        self.message = message
        self.line = line
        self.key = key
        super().__init__(self._render())

    def _render(self) -> str:
        parts = [self.message]
        if self.line is not None:
            parts.append(f"at line {self.line}")
        if self.key is not None:
            parts.append(f"(key '{self.key}')")
        return " ".join(parts)


class UnknownRegionError(RegionMapFormatError):
    """A cell references a region that was never declared."""

    kind = "unknown-region"


class EmptyRegionCatalogError(RegionMapFormatError):
    """Cell parsing started without any declared regions."""

    kind = "no-region-data"


class DuplicateCellError(RegionMapFormatError):
    """The same cell coordinate appears on more than one line."""

    kind = "duplicate-cell"


class MissingMetadataError(RegionMapFormatError):
    """A region has no metadata entry and strict metadata is enabled."""

    kind = "missing-metadata"


class PointFormatError(ValueError):
    """Text that does not describe an integer point."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid point '{text}'")
