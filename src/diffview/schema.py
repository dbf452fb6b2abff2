"""Data model for parsed and highlighted diff lines."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel


class DiffLineKind(StrEnum):
    """Supported diff line kinds."""

    ADD = "add"
    REMOVE = "remove"
    CONTEXT = "context"
    HEADER = "header"


class DiffSegment(BaseModel):
    """Contiguous run of text within one line's content."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    changed: bool


class _DiffLineBase(BaseModel):
    """Shared configuration for every diff line variant."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    content: str


class _SegmentedLine(_DiffLineBase):
    """Line kind that can carry inline highlight segments."""

    segments: tuple[DiffSegment, ...] | None = None

    @model_validator(mode="after")
    def validate_segments_cover_content(self) -> _SegmentedLine:
        """Validate that segment texts concatenate back to the line content."""
        if self.segments is not None:
            joined = "".join(segment.text for segment in self.segments)
            if joined != self.content:
                raise ValueError("segments must concatenate to the line content exactly.")
        return self


class AddLine(_SegmentedLine):
    """Line present only in the new file."""

    kind: Literal["add"] = "add"
    new_line_number: int

    @property
    def old_line_number(self) -> None:
        return None

    def with_segments(self, segments: tuple[DiffSegment, ...]) -> AddLine:
        """Return a copy of this line carrying inline segments."""
        return AddLine(
            content=self.content,
            new_line_number=self.new_line_number,
            segments=segments,
        )


class RemoveLine(_SegmentedLine):
    """Line present only in the old file."""

    kind: Literal["remove"] = "remove"
    old_line_number: int

    @property
    def new_line_number(self) -> None:
        return None

    def with_segments(self, segments: tuple[DiffSegment, ...]) -> RemoveLine:
        """Return a copy of this line carrying inline segments."""
        return RemoveLine(
            content=self.content,
            old_line_number=self.old_line_number,
            segments=segments,
        )


class ContextLine(_DiffLineBase):
    """Unchanged line present in both files."""

    kind: Literal["context"] = "context"
    old_line_number: int
    new_line_number: int

    @property
    def segments(self) -> None:
        return None


class HeaderLine(_DiffLineBase):
    """Hunk header line, kept verbatim in ``content``."""

    kind: Literal["header"] = "header"

    @property
    def old_line_number(self) -> None:
        return None

    @property
    def new_line_number(self) -> None:
        return None

    @property
    def segments(self) -> None:
        return None


DiffLine = Annotated[
    AddLine | RemoveLine | ContextLine | HeaderLine,
    Field(discriminator="kind"),
]

DIFF_LINES_ADAPTER: TypeAdapter[list[DiffLine]] = TypeAdapter(list[DiffLine])


def dump_diff_lines(lines: tuple[DiffLine, ...] | list[DiffLine]) -> list[dict[str, object]]:
    """Dump diff lines to JSON-compatible dicts using camelCase keys."""
    return DIFF_LINES_ADAPTER.dump_python(
        list(lines),
        mode="json",
        by_alias=True,
        exclude_none=True,
    )


def load_diff_lines(payload: object) -> list[DiffLine]:
    """Validate a JSON-compatible list into typed diff line variants."""
    return DIFF_LINES_ADAPTER.validate_python(payload)
