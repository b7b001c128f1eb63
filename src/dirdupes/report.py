"""Plain-text rendering of duplicate groups."""

from __future__ import annotations

from dirdupes.catalog import DirSignature
from dirdupes.grouper import DuplicateGroup


def format_dirsig(dirsig: DirSignature) -> str:
    return f"[{dirsig.signature.describe()}] {dirsig.path}"


def format_group(group: DuplicateGroup) -> list[str]:
    """One line per member followed by an empty separator line."""
    return [format_dirsig(m) for m in group.members] + [""]


def format_report(groups: list[DuplicateGroup]) -> str:
    lines: list[str] = []
    for group in groups:
        lines.extend(format_group(group))
    return "\n".join(lines) + "\n" if lines else ""
