"""
Parser for the [RegionAreas] section.

Each line declares one region border::

    urnEastmarch = [(10,-4)(12,-4)(12,2)(10,2)]

Points are given on the coarse map grid and scaled by ``REGION_POINT_SCALE``.
The first line for an editor ID creates the region; later lines with the
same (case-sensitive) editor ID are ignored.
"""

from typing import Any, Dict, List, Optional, Tuple

import structlog

from ..config import Settings, settings as default_settings
from .errors import MissingMetadataError, PointFormatError, RegionMapFormatError
from .metadata import RegionMetadataSource
from .points import P2Int, REGION_POINT_SCALE, find_points, parse_point, scale_points
from .records import RegionPatch, RegionRecord
from .sections import Section

logger = structlog.get_logger()


def split_entry(line: str) -> Optional[Tuple[str, str]]:
    """Split ``key=value`` on the first '='; None when there is no '='."""
    eq = line.find("=")
    if eq == -1:
        return None
    return line[:eq], line[eq + 1:]


def parse_region_points(value: str, line_number: int, editor_id: str) -> List[P2Int]:
    """Parse every point of a region's point list, failing on the first bad one."""
    points = []
    for text in find_points(value):
        try:
            points.append(parse_point(text))
        except PointFormatError as e:
            raise RegionMapFormatError(
                f"Invalid point '{text}'", line=line_number, key=editor_id
            ) from e
    return points


def parse_region_areas(
    section: Optional[Section],
    metadata: RegionMetadataSource,
    patch: RegionPatch,
    worldspace_id: Any = None,
    settings: Optional[Settings] = None,
) -> List[RegionRecord]:
    """
    Create one region record per unique editor ID in the section.

    Args:
        section: The [RegionAreas] section, or None when the file has none
        metadata: Lookup for map color, map name and priority
        patch: Allocates form keys for the new records
        worldspace_id: Worldspace the regions belong to
        settings: Overrides the module settings

    Returns:
        Records in first-seen order

    Raises:
        RegionMapFormatError: On a malformed point or a missing editor ID
        MissingMetadataError: When strict metadata is on and an entry is missing
    """
    settings = settings or default_settings
    regions: List[RegionRecord] = []
    seen: Dict[str, RegionRecord] = {}

    if section is None:
        return regions

    for line_number, line in section:
        entry = split_entry(line)
        if entry is None:
            continue

        key, raw_value = entry
        editor_id = key.strip()
        value = raw_value.strip("[] \n")

        if not editor_id:
            raise RegionMapFormatError("Region entry has no editor ID", line=line_number)

        polygon = scale_points(
            parse_region_points(value, line_number, editor_id), REGION_POINT_SCALE
        )

        if editor_id in seen:
            continue

        data = metadata.find(editor_id)
        if data is None:
            if settings.strict_metadata:
                raise MissingMetadataError(
                    "No metadata for region", line=line_number, key=editor_id
                )
            logger.warning("Region has no metadata, using defaults",
                           editor_id=editor_id, line=line_number)
            display_name = None
            color = tuple(settings.default_color)
            priority = settings.default_priority
        else:
            display_name = data.map_name
            color = tuple(data.color)
            priority = data.priority

        record = RegionRecord(
            editor_name=editor_id,
            display_name=display_name,
            color=color,
            map_priority=priority,
            polygon=tuple(polygon),
            identifier=patch.next_identifier(),
            worldspace_id=worldspace_id,
        )
        seen[editor_id] = record
        regions.append(record)

        logger.debug("Region created", editor_id=editor_id,
                     form_key=str(record.identifier), points=len(polygon))

    logger.info("Region areas parsed", regions=len(regions), start_line=section.start_line)
    return regions
