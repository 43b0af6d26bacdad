"""
Integer and float 2D points, and the parser for their text form.

Points are written as ``(x,y)`` in the map file. Region polygons are given on
a coarse integer grid and scaled into the engine's native units.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from .errors import PointFormatError

# Coarse map grid to engine units
REGION_POINT_SCALE = 4096

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_POINT_RE = re.compile(r"\(?(-?[0-9]+),(-?[0-9]+)\)?")
# Also matches candidates such as "(1-2,3)", which parse_point rejects.
_POINT_CANDIDATE_RE = re.compile(r"\([\-0-9]+,[\-0-9]+\)")


@dataclass(frozen=True)
class P2Int:
    """Integer point, used as the cell coordinate key."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class P2Float:
    """Float point, used for polygon vertices."""
    x: float
    y: float


def parse_point(text: str) -> P2Int:
    """Parse ``"x,y"`` or ``"(x,y)"`` into a P2Int.

    Args:
        text: Point text with surrounding whitespace already removed

    Returns:
        The parsed point

    Raises:
        PointFormatError: If the text is not two signed 32-bit integers
    """
    match = _POINT_RE.fullmatch(text)
    if match is None:
        raise PointFormatError(text)

    # a lone "(" or ")" is not a wrapped point
    if text.startswith("(") != text.endswith(")"):
        raise PointFormatError(text)

    x, y = int(match.group(1)), int(match.group(2))
    if not (INT32_MIN <= x <= INT32_MAX and INT32_MIN <= y <= INT32_MAX):
        raise PointFormatError(text)

    return P2Int(x, y)


def try_parse_point(text: str) -> Optional[P2Int]:
    """Like parse_point, but returns None on failure."""
    try:
        return parse_point(text)
    except PointFormatError:
        return None


def find_points(text: str) -> List[str]:
    """Return every parenthesized point candidate in text, left to right."""
    return _POINT_CANDIDATE_RE.findall(text)


def scale_points(points: Iterable[P2Int], factor: float = REGION_POINT_SCALE) -> List[P2Float]:
    """Scale integer points on both axes, converting them to float points."""
    coords = np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)
    scaled = coords * factor
    return [P2Float(float(x), float(y)) for x, y in scaled]
