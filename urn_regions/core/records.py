"""
Region records and the patch that receives them.

The patch stands in for the game plugin being written: it hands out form
keys for new records and collects finished regions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Tuple

import numpy as np

from .points import P2Float

# Edge fall-off of every generated region area, in engine units
EDGE_FALL_OFF = 1024

# First form ID that plugins may allocate
FIRST_FORM_ID = 0x800


@dataclass(frozen=True)
class FormKey:
    """Identifier of a record: form ID plus the plugin that owns it."""
    id: int
    mod_key: str

    def __str__(self) -> str:
        return f"{self.id:06X}:{self.mod_key}"


@dataclass(frozen=True, eq=False)
class RegionRecord:
    """A region created from one [RegionAreas] entry.

    Records compare by identity; two parses of the same document produce
    distinct records with equal fields (see ``same_definition``).
    """
    editor_name: str
    display_name: Optional[str]
    color: Tuple[int, int, int]
    map_priority: int
    polygon: Tuple[P2Float, ...]
    identifier: FormKey
    worldspace_id: Any = None
    edge_fall_off: int = EDGE_FALL_OFF

    @property
    def polygon_array(self) -> np.ndarray:
        """Polygon vertices as an (n, 2) float64 array."""
        return np.array([(p.x, p.y) for p in self.polygon], dtype=np.float64).reshape(-1, 2)

    def same_definition(self, other: RegionRecord) -> bool:
        """Whether both records describe the same region (identifier excluded)."""
        return (
            self.editor_name == other.editor_name
            and self.display_name == other.display_name
            and self.color == other.color
            and self.map_priority == other.map_priority
            and self.polygon == other.polygon
            and self.edge_fall_off == other.edge_fall_off
        )


class RegionPatch(Protocol):
    """Receiver of new region records."""

    def next_identifier(self) -> FormKey:
        ...

    def add_region(self, record: RegionRecord) -> None:
        ...


@dataclass
class InMemoryRegionPatch:
    """Patch that keeps new regions in a list."""
    mod_key: str
    next_form_id: int = FIRST_FORM_ID
    regions: List[RegionRecord] = field(default_factory=list)

    def next_identifier(self) -> FormKey:
        key = FormKey(self.next_form_id, self.mod_key)
        self.next_form_id += 1
        return key

    def add_region(self, record: RegionRecord) -> None:
        self.regions.append(record)
