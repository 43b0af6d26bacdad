"""
Parser for the [HoldMap] section.

Each line assigns regions to one cell::

    (10,-3) = ["urnEastmarch", "urnWinterhold"]

Names must refer to regions already created from [RegionAreas]. A line with
an unreadable coordinate is skipped with a warning; an unknown region name
stops the parse.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from .errors import DuplicateCellError, EmptyRegionCatalogError, UnknownRegionError
from .points import P2Int, try_parse_point
from .records import RegionRecord
from .region_areas import split_entry
from .sections import Section

logger = structlog.get_logger()


def parse_region_names(value: str) -> List[str]:
    """Split ``["A", "B"]`` into its non-empty names."""
    names = []
    for element in value.strip().strip("[]").split(","):
        name = element.strip().strip("\"'").strip()
        if name:
            names.append(name)
    return names


def parse_hold_map(
    section: Optional[Section],
    regions: Sequence[RegionRecord],
) -> Dict[P2Int, Tuple[RegionRecord, ...]]:
    """
    Build the cell coordinate to region lookup table.

    Args:
        section: The [HoldMap] section, or None when the file has none
        regions: Records created by parse_region_areas

    Returns:
        Mapping of cell coordinate to the regions of that cell, in line order

    Raises:
        EmptyRegionCatalogError: If no regions were declared
        UnknownRegionError: If a line names an undeclared region
        DuplicateCellError: If a coordinate appears on more than one line
    """
    if not regions:
        raise EmptyRegionCatalogError(
            "Invalid [RegionAreas] section doesn't contain any data",
            line=section.start_line if section is not None else None,
        )

    by_name = {}
    for record in regions:
        by_name.setdefault(record.editor_name, record)

    cells: Dict[P2Int, Tuple[RegionRecord, ...]] = {}
    first_seen: Dict[P2Int, int] = {}

    if section is None:
        return cells

    skipped = 0
    for line_number, line in section:
        entry = split_entry(line)
        if entry is None:
            continue

        key, value = entry
        coord = try_parse_point(key.replace("(", "").replace(")", "").replace(" ", ""))
        if coord is None:
            logger.warning("Invalid cell coordinate", line=line_number, text=line)
            skipped += 1
            continue

        links = []
        for editor_id in parse_region_names(value):
            record = by_name.get(editor_id)
            if record is None:
                raise UnknownRegionError(
                    f"Region '{editor_id}' doesn't have any area data",
                    line=line_number, key=editor_id,
                )
            links.append(record)

        if coord in cells:
            raise DuplicateCellError(
                f"Cell {coord} was already mapped at line {first_seen[coord]}",
                line=line_number, key=str(coord),
            )

        cells[coord] = tuple(links)
        first_seen[coord] = line_number

    logger.info("Hold map parsed", cells=len(cells), skipped=skipped,
                start_line=section.start_line)
    return cells
