"""
Core region map parsing functionality.
"""

from .errors import (
    RegionMapError, RegionMapFormatError, UnknownRegionError, EmptyRegionCatalogError,
    DuplicateCellError, MissingMetadataError, PointFormatError,
)
from .points import P2Int, P2Float, REGION_POINT_SCALE, parse_point, try_parse_point, find_points, scale_points
from .sections import FileHeader, Section, split_sections
from .metadata import RegionMetadata, RegionMetadataFile, load_region_metadata
from .records import FormKey, RegionRecord, InMemoryRegionPatch, EDGE_FALL_OFF
from .region_areas import parse_region_areas
from .hold_map import parse_hold_map
from .region_map import RegionMap, parse_region_map, load_region_map
from .handlers import WorldspaceHandler, HandlerRegistry, format_region_table

__all__ = ['RegionMapError', 'RegionMapFormatError', 'UnknownRegionError', 'EmptyRegionCatalogError',
           'DuplicateCellError', 'MissingMetadataError', 'PointFormatError',
           'P2Int', 'P2Float', 'REGION_POINT_SCALE', 'parse_point', 'try_parse_point', 'find_points',
           'scale_points', 'FileHeader', 'Section', 'split_sections',
           'RegionMetadata', 'RegionMetadataFile', 'load_region_metadata',
           'FormKey', 'RegionRecord', 'InMemoryRegionPatch', 'EDGE_FALL_OFF',
           'parse_region_areas', 'parse_hold_map', 'RegionMap', 'parse_region_map', 'load_region_map',
           'WorldspaceHandler', 'HandlerRegistry', 'format_region_table']
