"""
Region display metadata: map color, map name and priority per editor ID.

The metadata lives in a JSON file next to the map file::

    {"regions": [{"editor_id": "urnEastmarch", "color": "#4A6B8C",
                  "map_name": "Eastmarch", "priority": 60}]}
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol, Tuple, Union

from pydantic import BaseModel, Field, field_validator

Color = Tuple[int, int, int]


class RegionMetadata(BaseModel):
    """Display metadata for one region."""

    editor_id: str = Field(description="Editor ID of the region")
    color: Color = Field(default=(0, 0, 0), description="Map color as (r, g, b)")
    map_name: Optional[str] = Field(default=None, description="Name shown on the world map")
    priority: int = Field(default=60, ge=0, le=255, description="Region map priority")

    @field_validator("color", mode="before")
    @classmethod
    def _parse_color(cls, value):
        if isinstance(value, str):
            text = value.lstrip("#")
            if len(text) != 6:
                raise ValueError(f"Expected a #RRGGBB color, got '{value}'")
            return tuple(int(text[i:i + 2], 16) for i in (0, 2, 4))
        return value

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: Color) -> Color:
        if any(not 0 <= c <= 255 for c in value):
            raise ValueError(f"Color components must be within 0-255: {value}")
        return value


class RegionMetadataSource(Protocol):
    """Anything that can look up metadata by editor ID."""

    def find(self, editor_id: str) -> Optional[RegionMetadata]:
        ...


class RegionMetadataFile(BaseModel):
    """All region metadata entries of one file."""

    regions: List[RegionMetadata] = Field(default_factory=list)

    def find(self, editor_id: str) -> Optional[RegionMetadata]:
        """First entry whose editor ID matches, ignoring case."""
        wanted = editor_id.casefold()
        for entry in self.regions:
            if entry.editor_id.casefold() == wanted:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.regions)


def load_region_metadata(path: Union[str, Path]) -> RegionMetadataFile:
    """Load region metadata from a JSON file."""
    path = Path(path)
    return RegionMetadataFile.model_validate_json(path.read_text(encoding="utf-8"))
