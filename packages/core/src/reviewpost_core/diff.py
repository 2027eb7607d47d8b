"""Map new-file line numbers to GitHub review comment positions.

GitHub's review API addresses inline comments by ``position``: the number of
lines down from the first ``@@`` hunk header of the file's patch. The line
just below that header is position 1, and the count keeps increasing through
removed lines, ``\\ No newline at end of file`` markers and later hunk headers.

A patch may also carry hunk headers without their bodies (the compare API
truncates very large files this way). For those hunks the position of a line
inside the new-file range is derived from the header alone:

    position = header_offset + 1 + (line - new_start)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_HUNK_RE = re.compile(
    r"^@@ -(?P<old_start>\d+)(?:,(?P<old_count>\d+))? \+(?P<new_start>\d+)(?:,(?P<new_count>\d+))? @@"
)


@dataclass
class Hunk:
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    # Offset of the header line from the first hunk header (0 for the first hunk).
    header_offset: int
    positions: dict[int, int] = field(default_factory=dict)
    has_body: bool = False

    def covers(self, line: int) -> bool:
        return self.new_start <= line <= self.new_start + self.new_count - 1

    def position_for(self, line: int) -> int | None:
        if self.has_body:
            return self.positions.get(line)
        if self.covers(line):
            return self.header_offset + 1 + (line - self.new_start)
        return None


def parse_hunks(patch: str | None) -> list[Hunk]:
    """Split a patch into hunks, recording the position of every new-file line.

    Only a newline ends a patch line, so form feeds and Unicode line
    separators inside source lines do not shift positions.

    Text before the first valid header is ignored. A malformed ``@@`` line
    does not start a hunk; inside a hunk it is counted like any other line.
    """
    hunks: list[Hunk] = []
    current: Hunk | None = None
    new_line = 0
    first_index: int | None = None

    lines = (patch or "").split("\n")
    if lines[-1] == "":
        lines.pop()

    for index, raw in enumerate(lines):
        raw = raw.removesuffix("\r")
        m = _HUNK_RE.match(raw)
        if m:
            if first_index is None:
                first_index = index
            new_line = int(m.group("new_start"))
            current = Hunk(
                old_start=int(m.group("old_start")),
                old_count=int(m.group("old_count") or 1),
                new_start=new_line,
                new_count=int(m.group("new_count") or 1),
                header_offset=index - first_index,
            )
            hunks.append(current)
            continue

        if current is None:
            continue

        current.has_body = True
        position = index - first_index
        prefix = raw[:1]
        if prefix in ("-", "\\"):
            # Removed line or "\ No newline at end of file": no new-file line.
            continue
        # Context (" " or a blank line stripped of its space) or addition ("+").
        current.positions[new_line] = position
        new_line += 1

    return hunks


class PatchPositions:
    """A parsed patch answering position queries for one file."""

    def __init__(self, patch: str | None):
        self.hunks = parse_hunks(patch)

    def anchor(self) -> int | None:
        """Position for a file-level comment: the top of the file's diff."""
        return 1 if self.hunks else None

    def for_line(self, line: int) -> int | None:
        for hunk in self.hunks:
            position = hunk.position_for(line)
            if position is not None:
                return position
        return None


def anchor_position(patch: str | None) -> int | None:
    return PatchPositions(patch).anchor()


def position_for_line(patch: str | None, line: int) -> int | None:
    """Return the diff position of a new-file line, or None if the patch does not show it."""
    return PatchPositions(patch).for_line(line)

