"""Shared pytest fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_patch() -> str:
    """Two-hunk patch as returned in a pull request files listing."""
    return "\n".join(
        [
            "@@ -10,4 +10,5 @@ def launch():",
            "     countdown = 10",
            "-    fuel = load_fuel(tank)",
            "+    fuel = load_fuel(primary_tank)",
            "+    check(fuel)",
            "     ignite(fuel)",
            "@@ -40,2 +41,2 @@",
            "-    return status",
            "+    return final_status",
            "\\ No newline at end of file",
        ]
    )


@pytest.fixture
def pull_request_files_rows(sample_patch: str) -> list[dict[str, object]]:
    """Minimal rows in the shape of the pull request files API."""
    return [
        {
            "filename": "src/rocket/launch.py",
            "status": "modified",
            "additions": 3,
            "deletions": 2,
            "changes": 5,
            "patch": sample_patch,
            "previous_filename": None,
        },
        {
            "filename": "src/rocket/assets/logo.png",
            "status": "added",
            "additions": 0,
            "deletions": 0,
            "changes": 0,
        },
        {
            "filename": "README.md",
            "status": "modified",
            "additions": 1,
            "deletions": 0,
            "changes": 1,
            "patch": "@@ -1,1 +1,2 @@\n # Rocket\n+Launch tooling.",
        },
    ]
