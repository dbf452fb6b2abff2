"""Word-level highlighting for adjacent remove/add line pairs."""

from __future__ import annotations

from collections.abc import Sequence

from diffview.config import DiffViewSettings
from diffview.diff_parser import parse_diff
from diffview.schema import AddLine, DiffLine, DiffSegment, RemoveLine
from diffview.word_diff import WordOp, diff_words


def compute_inline_highlights(lines: Sequence[DiffLine]) -> tuple[DiffLine, ...]:
    """Attach word-level segments to each remove line directly followed by an add.

    Pairing is greedy: once a remove/add pair is consumed, the add line is never
    reconsidered. In a run of removes only the last pairs; in a run of adds only
    the first does. Every other line is passed through unchanged.
    """
    result: list[DiffLine] = []
    index = 0

    while index < len(lines):
        line = lines[index]
        next_line = lines[index + 1] if index + 1 < len(lines) else None

        if isinstance(line, RemoveLine) and isinstance(next_line, AddLine):
            old_segments, new_segments = _pair_segments(line.content, next_line.content)
            result.append(line.with_segments(old_segments))
            result.append(next_line.with_segments(new_segments))
            index += 2
            continue

        result.append(line)
        index += 1

    return tuple(result)


def highlight_patch(
    patch: str,
    *,
    settings: DiffViewSettings | None = None,
) -> tuple[DiffLine, ...]:
    """Parse a patch and, unless disabled in settings, add inline highlights."""
    resolved_settings = settings or DiffViewSettings()
    lines = parse_diff(patch)
    if not resolved_settings.inline_highlights:
        return lines
    return compute_inline_highlights(lines)


def _pair_segments(
    old_content: str,
    new_content: str,
) -> tuple[tuple[DiffSegment, ...], tuple[DiffSegment, ...]]:
    """Build old-side and new-side segments from a word diff."""
    old_segments: list[DiffSegment] = []
    new_segments: list[DiffSegment] = []

    for change in diff_words(old_content, new_content):
        if change.op is WordOp.DELETED:
            old_segments.append(DiffSegment(text=change.text, changed=True))
        elif change.op is WordOp.INSERTED:
            new_segments.append(DiffSegment(text=change.text, changed=True))
        else:
            segment = DiffSegment(text=change.text, changed=False)
            old_segments.append(segment)
            new_segments.append(segment)

    return tuple(old_segments), tuple(new_segments)
