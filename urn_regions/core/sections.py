"""
Section splitter for the INI-like region map file.

The map file has two recognized sections, ``[RegionAreas]`` (also written
``[Regions]``) and ``[HoldMap]``. This module partially parses the file to
find the headers and collects the content lines of each section, keeping the
source line number of every line for diagnostics.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

import structlog

from ..config import settings

logger = structlog.get_logger()


class FileHeader(str, Enum):
    """Recognized section headers."""

    # Points that make up the border of each region
    REGION_AREAS = "RegionAreas"
    # Which regions belong to each cell coordinate
    HOLD_MAP = "HoldMap"

    @classmethod
    def from_name(cls, name: str) -> Optional[FileHeader]:
        """Case-insensitive header lookup, None for unrecognized names."""
        return _HEADER_NAMES.get(name.lower())


_HEADER_NAMES = {
    "regionareas": FileHeader.REGION_AREAS,
    "regions": FileHeader.REGION_AREAS,
    "holdmap": FileHeader.HOLD_MAP,
}


@dataclass
class Section:
    """Content lines of one section, in file order."""
    header: FileHeader
    start_line: int
    lines: List[Tuple[int, str]] = field(default_factory=list)

    def append(self, line_number: int, text: str) -> None:
        self.lines.append((line_number, text))

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        """Buffer contents, one line per entry plus a trailing newline."""
        return "".join(f"{line}\n" for _, line in self.lines) + "\n"


def strip_comment(line: str, markers: str) -> str:
    """Drop everything from the first comment marker onwards."""
    cut = len(line)
    for marker in markers:
        index = line.find(marker)
        if index != -1 and index < cut:
            cut = index
    return line[:cut]


def normalize_line(line: str, markers: str) -> str:
    """Strip the comment and remove every whitespace character."""
    return "".join(strip_comment(line, markers).split())


def header_name(line: str) -> Optional[str]:
    """Return the bracketed name if the normalized line is a header."""
    if "=" in line:
        return None
    open_index = line.find("[")
    if open_index == -1:
        return None
    close_index = line.find("]", open_index + 1)
    if close_index == -1:
        return None
    return line[open_index + 1:close_index]


def split_sections(
    source: Union[str, Iterable[str]],
    comment_markers: Optional[str] = None,
) -> Dict[FileHeader, Section]:
    """
    Split a map document into its recognized sections.

    Lines under an unrecognized header are discarded until the next
    recognized one. A header that appears again reopens its section and
    further lines are appended to it.

    Args:
        source: Whole document as a string, or any iterable of lines
        comment_markers: Characters starting a line comment (defaults to settings)

    Returns:
        Mapping of header to section; headers absent from the document are
        absent from the mapping
    """
    markers = settings.comment_markers if comment_markers is None else comment_markers
    lines = io.StringIO(source) if isinstance(source, str) else source

    sections: Dict[FileHeader, Section] = {}
    current: Optional[Section] = None

    for line_number, raw in enumerate(lines, start=1):
        line = normalize_line(raw, markers)
        if not line:
            continue

        name = header_name(line)
        if name is not None:
            header = FileHeader.from_name(name)
            if header is None:
                logger.debug("Skipping unrecognized section", header=name, line=line_number)
                current = None
                continue
            # a reopened header keeps the start line of its first occurrence
            if header not in sections:
                sections[header] = Section(header=header, start_line=line_number)
            current = sections[header]
        elif current is not None:
            current.append(line_number, line)

    logger.debug(
        "Map file split into sections",
        sections={h.value: len(s) for h, s in sections.items()},
    )
    return sections
