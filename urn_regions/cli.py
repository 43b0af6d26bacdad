"""Command-line front end: parse a region map file and report what it contains."""

import argparse
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .config import settings
from .core import (
    HandlerRegistry, InMemoryRegionPatch, RegionMapError, RegionMetadataFile,
    WorldspaceHandler, format_region_table, load_region_map, load_region_metadata,
)
from .logging_config import configure_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse a region map file into region records")
    parser.add_argument("map_file", help="INI-like map file with [RegionAreas] and [HoldMap]")
    parser.add_argument("--metadata", help="JSON file with region colors, map names and priorities")
    parser.add_argument("--worldspace", default="Tamriel", help="Worldspace the map belongs to")
    parser.add_argument("--mod-key", default=None, help="Plugin that receives the new regions")
    parser.add_argument("--verbose", action="store_true", help="Print every parsed region")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    patch = InMemoryRegionPatch(mod_key=args.mod_key or settings.mod_key)
    registry = HandlerRegistry()

    try:
        metadata = load_region_metadata(args.metadata) if args.metadata else RegionMetadataFile()
        region_map = load_region_map(args.map_file, args.worldspace, metadata, patch)
    except (RegionMapError, OSError, ValidationError) as e:
        logger.error("Region map parse failed", path=args.map_file, error=str(e))
        return 1

    handler = registry.register(WorldspaceHandler(region_map))

    regions = handler.region_map.regions
    print(f"Parsed {len(regions)} region{'' if len(regions) == 1 else 's'} "
          f"containing {region_map.cell_count} cell{'' if region_map.cell_count == 1 else 's'}")
    if args.verbose:
        print("\n".join(format_region_table(regions)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
