"""JSON artifacts for parsed diffs and file trees."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict
from typing import Any

from diffview.file_tree import FileTreeNode, NodeKind, summarize_diff
from diffview.schema import DiffLine, dump_diff_lines

ARTIFACT_SCHEMA_VERSION = "v1"


def build_diff_artifact(lines: Sequence[DiffLine], *, path: str | None = None) -> dict[str, Any]:
    """Build JSON-serializable payload for one parsed patch."""
    return {
        "schema_version": ARTIFACT_SCHEMA_VERSION,
        "path": path,
        "stats": asdict(summarize_diff(lines)),
        "lines": dump_diff_lines(list(lines)),
    }


def build_tree_artifact(root: FileTreeNode) -> dict[str, Any]:
    """Build nested JSON-serializable payload for a file tree."""
    node: dict[str, Any] = {
        "name": root.name,
        "path": root.path,
        "kind": str(root.kind),
    }
    if root.kind is NodeKind.FILE:
        node["additions"] = root.additions
        node["deletions"] = root.deletions
    else:
        node["children"] = [build_tree_artifact(child) for child in root.children]
    return node
