"""
Worldspace handlers and the registry that owns them for one run.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import structlog

from .points import P2Int
from .records import RegionRecord
from .region_map import RegionMap

logger = structlog.get_logger()


class WorldspaceHandler:
    """Applies one region map to the cells of its worldspace."""

    def __init__(self, region_map: RegionMap):
        self.region_map = region_map

    @property
    def worldspace_id(self) -> Any:
        return self.region_map.worldspace_id

    def applies_to(self, worldspace_id: Any) -> bool:
        return self.worldspace_id == worldspace_id

    def assign_regions(self, cells: Iterable[P2Int]) -> Dict[P2Int, Tuple[RegionRecord, ...]]:
        """Regions for each of the given cells; unmapped cells are left out."""
        assigned = {}
        for coord in cells:
            regions = self.region_map.lookup(coord)
            if regions:
                assigned[coord] = regions
        return assigned


class HandlerRegistry:
    """Handlers for the worldspaces processed in one run."""

    def __init__(self):
        self._handlers: List[WorldspaceHandler] = []

    def register(self, handler: WorldspaceHandler) -> WorldspaceHandler:
        if self.handler_for(handler.worldspace_id) is not None:
            raise ValueError(f"Worldspace {handler.worldspace_id} already has a handler")
        self._handlers.append(handler)
        logger.info("Added worldspace handler",
                    worldspace=str(handler.worldspace_id),
                    regions=handler.region_map.region_count,
                    cells=handler.region_map.cell_count)
        return handler

    def handler_for(self, worldspace_id: Any) -> Optional[WorldspaceHandler]:
        for handler in self._handlers:
            if handler.applies_to(worldspace_id):
                return handler
        return None

    def clear(self) -> None:
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[WorldspaceHandler]:
        return iter(self._handlers)


def format_region_table(regions: Sequence[RegionRecord]) -> List[str]:
    """Render regions as aligned ``EditorID`` / ``Displayname`` rows."""
    longest_id = max((len(r.editor_name) for r in regions), default=0)
    longest_name = max((len(r.display_name or "") for r in regions), default=0)

    lines = ["{"]
    for r in regions:
        id_pad = " " * (longest_id + 4 - len(r.editor_name))
        name = r.display_name or ""
        name_pad = " " * (longest_name - len(name))
        lines.append(
            f"    {{ EditorID: '{r.editor_name}':{id_pad}Displayname: '{name}'{name_pad} }},"
        )
    lines.append("}")
    return lines
