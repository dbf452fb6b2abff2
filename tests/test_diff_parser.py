"""Unit tests for unified diff parsing."""

from __future__ import annotations

import logging

import pytest
from diffview.diff_parser import parse_diff
from diffview.schema import AddLine, ContextLine, DiffLineKind, HeaderLine, RemoveLine


@pytest.mark.unit
def test_parse_diff_single_hunk_numbers_lines() -> None:
    lines = parse_diff("@@ -1,5 +1,6 @@\n context\n-removed\n+added\n")

    assert lines == (
        HeaderLine(content="@@ -1,5 +1,6 @@"),
        ContextLine(content="context", old_line_number=1, new_line_number=1),
        RemoveLine(content="removed", old_line_number=2),
        AddLine(content="added", new_line_number=2),
    )


@pytest.mark.unit
def test_parse_diff_returns_empty_tuple_for_empty_patch() -> None:
    assert parse_diff("") == ()


@pytest.mark.unit
def test_parse_diff_resets_counters_on_each_hunk(sample_patch: str) -> None:
    lines = parse_diff(sample_patch)

    assert [line.kind for line in lines] == [
        DiffLineKind.HEADER,
        DiffLineKind.CONTEXT,
        DiffLineKind.REMOVE,
        DiffLineKind.ADD,
        DiffLineKind.ADD,
        DiffLineKind.CONTEXT,
        DiffLineKind.HEADER,
        DiffLineKind.REMOVE,
        DiffLineKind.ADD,
    ]
    assert (lines[5].old_line_number, lines[5].new_line_number) == (12, 13)
    assert lines[7].old_line_number == 40
    assert lines[8].new_line_number == 41


@pytest.mark.unit
def test_parse_diff_accepts_header_without_counts() -> None:
    lines = parse_diff("@@ -7 +9 @@\n-a\n+b")

    assert lines[1].old_line_number == 7
    assert lines[2].new_line_number == 9


@pytest.mark.unit
def test_parse_diff_keeps_header_trailing_context_in_content() -> None:
    header = "@@ -10,4 +10,5 @@ def launch():"
    lines = parse_diff(header)

    assert lines == (HeaderLine(content=header),)


@pytest.mark.unit
def test_parse_diff_malformed_header_keeps_stale_counters() -> None:
    patch = "\n".join(["@@ -10,2 +20,2 @@", " first", "@@ not a hunk @@", " second"])
    lines = parse_diff(patch)

    assert lines[2] == HeaderLine(content="@@ not a hunk @@")
    assert lines[3] == ContextLine(content="second", old_line_number=11, new_line_number=21)


@pytest.mark.unit
def test_parse_diff_drops_unrecognized_lines() -> None:
    patch = "\n".join(
        [
            "diff --git a/app.py b/app.py",
            "@@ -1,1 +1,1 @@",
            "-old",
            "\\ No newline at end of file",
            "+new",
            "",
        ]
    )
    lines = parse_diff(patch)

    assert [line.kind for line in lines] == ["header", "remove", "add"]


@pytest.mark.unit
def test_parse_diff_without_header_counts_from_zero() -> None:
    lines = parse_diff("+first\n+second\n-gone")

    assert [line.new_line_number for line in lines[:2]] == [0, 1]
    assert lines[2].old_line_number == 0


@pytest.mark.unit
def test_parse_diff_strips_only_the_marker_character() -> None:
    lines = parse_diff("@@ -1,3 +1,3 @@\n  indented\n--flag\n++counter")

    assert lines[1].content == " indented"
    assert lines[2].content == "-flag"
    assert lines[3].content == "+counter"


@pytest.mark.unit
def test_parse_diff_logs_malformed_header(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="diffview.diff_parser"):
        parse_diff("@@ broken @@\n+x")

    assert "Malformed hunk header" in caplog.text


@pytest.mark.unit
def test_parse_diff_accepts_comma_without_count() -> None:
    lines = parse_diff("@@ -5, +7, @@\n a")

    assert lines[1] == ContextLine(content="a", old_line_number=5, new_line_number=7)


@pytest.mark.unit
def test_parse_diff_oversized_start_number_is_treated_as_malformed() -> None:
    header = "@@ -" + "1" * 5000 + ",1 +1,1 @@"
    lines = parse_diff("@@ -3 +4 @@\n x\n" + header + "\n-a\n+b")

    assert lines[2] == HeaderLine(content=header)
    assert lines[3] == RemoveLine(content="a", old_line_number=4)
    assert lines[4] == AddLine(content="b", new_line_number=5)
