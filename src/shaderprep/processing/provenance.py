from __future__ import annotations

"""Line buffer that remembers which file produced each line.

`TextWithProvenance` pairs the merged lines with an arena of `Segment`
records indexed by insertion order. Insertion order is provenance depth
order: a segment is always appended after the segment that encloses it, so
the implicit include tree is recovered by scanning backwards from an index
rather than by storing parent references.

Line numbers are 0-based everywhere in this module.
"""

from typing import List, Optional, Sequence, Set, Tuple

from shaderprep.core.models import Segment


class TextWithProvenance:
    """Editable line buffer paired with ordered provenance segments."""

    def __init__(self, text: str, original_file: str) -> None:
        self._lines: List[str] = text.split("\n")
        self._segments: List[Segment] = [Segment(0, len(self._lines), original_file)]

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    # Queries ---------------------------------------------------------------

    def segment_index_at(self, line: int) -> Optional[int]:
        """Index of the last-added segment containing *line*."""
        for idx in range(len(self._segments) - 1, -1, -1):
            if self._segments[idx].contains(line):
                return idx
        return None

    def segment_at(self, line: int) -> Optional[Segment]:
        """Return the innermost segment owning *line* (last-added wins)."""
        idx = self.segment_index_at(line)
        return None if idx is None else self._segments[idx]

    def parent_index(self, index: int) -> Optional[int]:
        """Index of the closest preceding segment enclosing segment *index*."""
        segment = self._segments[index]
        for idx in range(index - 1, -1, -1):
            if segment.is_inside(self._segments[idx]):
                return idx
        return None

    def parent_of(self, segment: Segment) -> Optional[Segment]:
        """Return the segment that *segment* was spliced into, or None at top level."""
        try:
            index = self._segments.index(segment)
        except ValueError:
            return None
        parent = self.parent_index(index)
        return None if parent is None else self._segments[parent]

    def children_indices(self, index: int) -> List[int]:
        """Indices of the direct children of segment *index*."""
        return [
            idx for idx in range(index + 1, len(self._segments))
            if self.parent_index(idx) == index
        ]

    def file_and_line_at(self, line: int) -> Optional[Tuple[str, int]]:
        """Map a merged line to ``(original_file, local_line)``.

        Each direct child that ends before *line* replaced one directive line
        of the owning file with `child.length` lines, so its surplus is
        subtracted to recover the owner's own numbering.
        """
        index = self.segment_index_at(line)
        if index is None:
            return None
        owner = self._segments[index]
        local_line = line - owner.start_line
        for child_idx in self.children_indices(index):
            child = self._segments[child_idx]
            if child.end_line <= line:
                local_line -= child.length - 1
        return owner.original_file, local_line

    def all_segments_at(self, line: int) -> List[Segment]:
        """Every segment containing *line*, outermost first."""
        return [s for s in self._segments if s.contains(line)]

    def all_used_files(self) -> Set[str]:
        return {s.original_file for s in self._segments}

    # Edits -----------------------------------------------------------------

    def _splice_lines(self, line: int, new_lines: Sequence[str]) -> None:
        if not 0 <= line < len(self._lines):
            raise IndexError(f"line {line} out of range (0..{len(self._lines) - 1})")
        self._lines[line:line + 1] = list(new_lines)
        delta = len(new_lines) - 1
        if delta == 0:
            return
        shifted: List[Segment] = []
        for s in self._segments:
            start = s.start_line + delta if s.start_line > line else s.start_line
            end = s.end_line + delta if s.end_line > line else s.end_line
            shifted.append(Segment(start, end, s.original_file))
        self._segments = shifted

    def replace_line(self, line: int, with_text: str, original_file: str) -> None:
        """Replace *line* with the lines of *with_text*, attributed to *original_file*."""
        new_lines = with_text.split("\n")
        self._splice_lines(line, new_lines)
        self._segments.append(Segment(line, line + len(new_lines), original_file))

    def splice_includes(self, line: int, nested: TextWithProvenance) -> None:
        """Replace *line* with the content of *nested*, keeping its provenance."""
        self._splice_lines(line, nested._lines)
        self._segments.extend(s.shifted(line) for s in nested._segments)

    def blank_line(self, line: int) -> None:
        """Empty the content of *line*; line count and segments are unchanged."""
        self._lines[line] = ""

    def __repr__(self) -> str:
        return f"TextWithProvenance(lines={len(self._lines)}, segments={len(self._segments)})"
