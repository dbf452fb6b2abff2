"""Unified diff patch parsing."""

from __future__ import annotations

import logging
import re

from diffview.schema import AddLine, ContextLine, DiffLine, HeaderLine, RemoveLine

logger = logging.getLogger(__name__)

HUNK_HEADER_PATTERN = re.compile(
    r"@@ -(?P<old_start>\d+),?(?P<old_count>\d*) "
    r"\+(?P<new_start>\d+),?(?P<new_count>\d*) @@"
)


def parse_diff(patch: str) -> tuple[DiffLine, ...]:
    """Parse a hunk-only unified diff patch into typed line records.

    Lines without a recognized prefix (``@@``, ``+``, ``-`` or a space) are
    dropped. A header that does not match the hunk pattern is still emitted,
    but the running line counters keep their previous values.
    """
    lines: list[DiffLine] = []
    old_line = 0
    new_line = 0
    dropped = 0

    for line in patch.split("\n"):
        if line.startswith("@@"):
            starts = _hunk_starts(line)
            if starts is not None:
                old_line, new_line = starts
            else:
                logger.debug("Malformed hunk header %r; keeping line counters.", line)
            lines.append(HeaderLine(content=line))
        elif line.startswith("+"):
            lines.append(AddLine(content=line[1:], new_line_number=new_line))
            new_line += 1
        elif line.startswith("-"):
            lines.append(RemoveLine(content=line[1:], old_line_number=old_line))
            old_line += 1
        elif line.startswith(" "):
            lines.append(
                ContextLine(
                    content=line[1:],
                    old_line_number=old_line,
                    new_line_number=new_line,
                )
            )
            old_line += 1
            new_line += 1
        elif line:
            dropped += 1

    if dropped:
        logger.debug("Dropped %d unrecognized patch lines.", dropped)
    return tuple(lines)


def _hunk_starts(header: str) -> tuple[int, int] | None:
    """Return the old and new start lines of a hunk header, if it has them."""
    header_match = HUNK_HEADER_PATTERN.search(header)
    if header_match is None:
        return None
    try:
        return int(header_match.group("old_start")), int(header_match.group("new_start"))
    except ValueError:
        # Start numbers beyond the int string-conversion limit.
        return None
