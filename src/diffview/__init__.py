"""Unified diff parsing and inline word-level highlighting."""

from diffview.diff_parser import parse_diff
from diffview.inline_highlight import compute_inline_highlights, highlight_patch
from diffview.schema import (
    AddLine,
    ContextLine,
    DiffLine,
    DiffLineKind,
    DiffSegment,
    HeaderLine,
    RemoveLine,
)

__all__ = [
    "AddLine",
    "ContextLine",
    "DiffLine",
    "DiffLineKind",
    "DiffSegment",
    "HeaderLine",
    "RemoveLine",
    "compute_inline_highlights",
    "highlight_patch",
    "parse_diff",
]
