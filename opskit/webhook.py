"""Helpers for handling push webhooks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class HeadCommit:
    """A commit carried in a push event, with the paths it touched."""

    id: str = ""
    message: str = ""
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)


def get_files(commits: Iterable[HeadCommit]) -> list[str]:
    """Return each added or modified path once, in the order first seen."""
    seen: dict[str, None] = {}
    for commit in commits:
        for path in (*commit.added, *commit.modified):
            seen.setdefault(path, None)
    return list(seen)