"""Pull request file listings, file trees and per-diff statistics."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from diffview.schema import AddLine, DiffLine, HeaderLine, RemoveLine

logger = logging.getLogger(__name__)


class PullRequestFilesError(ValueError):
    """Raised when a pull request files payload has an unexpected shape."""

    def __init__(self, message: str, *, row_index: int | None, field_name: str | None) -> None:
        super().__init__(message)
        self.row_index = row_index
        self.field_name = field_name


class NodeKind(StrEnum):
    """File tree node kinds."""

    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True, slots=True)
class PullRequestFile:
    """Changed file details from a pull request files listing."""

    path: str
    status: str
    additions: int
    deletions: int
    changes: int
    patch: str | None
    previous_filename: str | None = None

    @property
    def is_binary(self) -> bool:
        return self.patch is None


@dataclass(slots=True)
class FileTreeNode:
    """Folder or file in the changed-file tree."""

    name: str
    path: str
    kind: NodeKind
    children: list[FileTreeNode] = field(default_factory=list)
    additions: int | None = None
    deletions: int | None = None

    def find_child(self, name: str) -> FileTreeNode | None:
        """Return the direct child with the given name, if any."""
        for child in self.children:
            if child.name == name:
                return child
        return None


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Line counts for one parsed patch."""

    hunks: int = 0
    additions: int = 0
    deletions: int = 0
    context: int = 0
    highlighted_pairs: int = 0


def _require_str(row: dict[str, Any], *, key: str, row_index: int) -> str:
    """Read a required string field from a files row."""
    value = row.get(key)
    if not isinstance(value, str):
        raise PullRequestFilesError(
            f"Expected string field '{key}' in files row {row_index}.",
            row_index=row_index,
            field_name=key,
        )
    return value


def _require_int(row: dict[str, Any], *, key: str, row_index: int) -> int:
    """Read a required integer field from a files row."""
    value = row.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise PullRequestFilesError(
            f"Expected integer field '{key}' in files row {row_index}.",
            row_index=row_index,
            field_name=key,
        )
    return value


def _optional_str(row: dict[str, Any], *, key: str, row_index: int) -> str | None:
    """Read an optional string field from a files row."""
    value = row.get(key)
    if value is not None and not isinstance(value, str):
        raise PullRequestFilesError(
            f"Expected '{key}' to be a string or null in files row {row_index}.",
            row_index=row_index,
            field_name=key,
        )
    return value


def parse_pull_request_files(rows: object) -> tuple[PullRequestFile, ...]:
    """Validate a pull request files payload into ``PullRequestFile`` records."""
    if not isinstance(rows, list):
        raise PullRequestFilesError(
            "Expected a JSON array of pull request files.",
            row_index=None,
            field_name=None,
        )

    files: list[PullRequestFile] = []
    for row_index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise PullRequestFilesError(
                f"Expected JSON object for files row {row_index}.",
                row_index=row_index,
                field_name=None,
            )
        files.append(
            PullRequestFile(
                path=_require_str(row, key="filename", row_index=row_index),
                status=_require_str(row, key="status", row_index=row_index),
                additions=_require_int(row, key="additions", row_index=row_index),
                deletions=_require_int(row, key="deletions", row_index=row_index),
                changes=_require_int(row, key="changes", row_index=row_index),
                patch=_optional_str(row, key="patch", row_index=row_index),
                previous_filename=_optional_str(
                    row, key="previous_filename", row_index=row_index
                ),
            )
        )
    return tuple(files)


def build_file_tree(files: Iterable[PullRequestFile]) -> FileTreeNode:
    """Group changed files into a folder tree.

    Children keep first-seen order. A path component that already exists
    under its parent is reused, so a later duplicate path does not replace
    the earlier file's counts. A path that runs through an existing file node
    is skipped, since a file cannot hold children.
    """
    root = FileTreeNode(name="", path="", kind=NodeKind.FOLDER)

    for changed_file in files:
        parts = changed_file.path.split("/")
        current = root
        for depth, part in enumerate(parts):
            if current.kind is NodeKind.FILE:
                logger.debug(
                    "Skipping %s: %s is already a file in the tree.",
                    changed_file.path,
                    current.path,
                )
                break
            is_file = depth == len(parts) - 1
            child = current.find_child(part)
            if child is None:
                child = FileTreeNode(
                    name=part,
                    path="/".join(parts[: depth + 1]),
                    kind=NodeKind.FILE if is_file else NodeKind.FOLDER,
                )
                if is_file:
                    child.additions = changed_file.additions
                    child.deletions = changed_file.deletions
                current.children.append(child)
            current = child

    return root


def summarize_diff(lines: Sequence[DiffLine]) -> DiffStats:
    """Count hunks, line kinds and highlighted pairs in a parsed patch."""
    hunks = additions = deletions = context = highlighted_pairs = 0
    for line in lines:
        if isinstance(line, HeaderLine):
            hunks += 1
        elif isinstance(line, AddLine):
            additions += 1
        elif isinstance(line, RemoveLine):
            deletions += 1
            if line.segments is not None:
                highlighted_pairs += 1
        else:
            context += 1
    return DiffStats(
        hunks=hunks,
        additions=additions,
        deletions=deletions,
        context=context,
        highlighted_pairs=highlighted_pairs,
    )
