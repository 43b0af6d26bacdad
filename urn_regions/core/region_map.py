"""
Region map: the parsed regions of one worldspace and their cell lookup.

``parse_region_map`` runs the whole pipeline over one document::

    sections -> [RegionAreas] -> region records
             -> [HoldMap]     -> cell coordinate to regions

The regions are handed to the patch only once both sections parsed
successfully, so a failed parse adds no regions to the patch. Form keys are
allocated while [RegionAreas] is parsed; the ones taken by a failed parse
stay consumed.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

import structlog

from ..config import Settings, settings as default_settings
from .hold_map import parse_hold_map
from .metadata import RegionMetadataSource
from .points import P2Int
from .records import FormKey, RegionPatch, RegionRecord
from .region_areas import parse_region_areas
from .sections import FileHeader, split_sections

logger = structlog.get_logger()


class RegionMap:
    """Regions of one worldspace and the cells they cover. Read-only."""

    def __init__(
        self,
        worldspace_id: Any,
        regions: Sequence[RegionRecord],
        cell_index: Mapping[P2Int, Sequence[RegionRecord]],
    ):
        self._worldspace_id = worldspace_id
        self._regions: Tuple[RegionRecord, ...] = tuple(regions)
        self._by_name: Dict[str, RegionRecord] = {r.editor_name: r for r in self._regions}

        known = {id(r) for r in self._regions}
        cells = {}
        for coord, links in cell_index.items():
            links = tuple(links)
            for record in links:
                if id(record) not in known:
                    raise ValueError(
                        f"Cell {coord} references region '{record.editor_name}' "
                        f"which is not part of this map"
                    )
            cells[coord] = links
        self._cell_index: Mapping[P2Int, Tuple[RegionRecord, ...]] = MappingProxyType(cells)

    @property
    def worldspace_id(self) -> Any:
        return self._worldspace_id

    @property
    def regions(self) -> Tuple[RegionRecord, ...]:
        """Regions in the order they were declared."""
        return self._regions

    @property
    def cell_index(self) -> Mapping[P2Int, Tuple[RegionRecord, ...]]:
        return self._cell_index

    @property
    def region_count(self) -> int:
        return len(self._regions)

    @property
    def cell_count(self) -> int:
        return len(self._cell_index)

    def lookup(self, coord: P2Int) -> Tuple[RegionRecord, ...]:
        """
        Regions associated with a cell.

        Args:
            coord: Cell coordinates (not block or sub-block coordinates)

        Returns:
            The cell's regions, or an empty tuple for unmapped cells
        """
        return self._cell_index.get(coord, ())

    def identifiers_for(self, coord: P2Int) -> Tuple[FormKey, ...]:
        """Form keys of the regions associated with a cell."""
        return tuple(r.identifier for r in self.lookup(coord))

    def get_region(self, editor_name: str) -> Optional[RegionRecord]:
        """Region with exactly this editor ID, if any."""
        return self._by_name.get(editor_name)

    def __contains__(self, editor_name: object) -> bool:
        return editor_name in self._by_name

    def __repr__(self) -> str:
        return (f"RegionMap(worldspace={self._worldspace_id!r}, "
                f"regions={self.region_count}, cells={self.cell_count})")


def parse_region_map(
    source: Union[str, Iterable[str]],
    worldspace_id: Any,
    metadata: RegionMetadataSource,
    patch: RegionPatch,
    settings: Optional[Settings] = None,
) -> RegionMap:
    """
    Parse a region map document.

    Args:
        source: Whole document as a string, or any iterable of lines
        worldspace_id: Worldspace the map belongs to
        metadata: Lookup for region map color, name and priority
        patch: Allocates form keys and receives the finished regions
        settings: Overrides the module settings

    Returns:
        The finished RegionMap

    Raises:
        RegionMapFormatError: On any fatal problem in the document
    """
    settings = settings or default_settings
    log = logger.bind(worldspace=str(worldspace_id))

    sections = split_sections(source, settings.comment_markers)

    regions = parse_region_areas(
        sections.get(FileHeader.REGION_AREAS), metadata, patch,
        worldspace_id=worldspace_id, settings=settings,
    )
    cells = parse_hold_map(sections.get(FileHeader.HOLD_MAP), regions)

    region_map = RegionMap(worldspace_id, regions, cells)
    for record in region_map.regions:
        patch.add_region(record)

    log.info("Region map parsed", regions=region_map.region_count, cells=region_map.cell_count)
    return region_map


def load_region_map(
    path: Union[str, Path],
    worldspace_id: Any,
    metadata: RegionMetadataSource,
    patch: RegionPatch,
    settings: Optional[Settings] = None,
) -> RegionMap:
    """Parse the region map file at ``path`` (UTF-8)."""
    path = Path(path)
    logger.info("Loading region map", path=str(path))
    with open(path, "r", encoding="utf-8") as f:
        return parse_region_map(f, worldspace_id, metadata, patch, settings=settings)
