"""Partition a catalog into groups of directories with identical signatures."""

from __future__ import annotations

from dataclasses import dataclass

import logging

from dirdupes.catalog import DirSignature
from dirdupes.signature import Signature

logger = logging.getLogger(__name__)


@dataclass
class DuplicateGroup:
    """Directories sharing one signature; the first member is the group head."""

    members: list[DirSignature]

    @property
    def signature(self) -> Signature:
        return self.members[0].signature

    @property
    def total_size(self) -> int:
        return self.signature.total_size

    @property
    def paths(self) -> list[str]:
        return [m.path for m in self.members]


def find_duplicates(needle: DirSignature, haystack: list[DirSignature]) -> DuplicateGroup | None:
    """Group *needle* with every entry of *haystack* that has its signature."""
    dups = [d for d in haystack if d.signature == needle.signature]
    if not dups:
        return None
    return DuplicateGroup(members=[needle, *dups])


def group_duplicates(dirsigs: list[DirSignature]) -> list[DuplicateGroup]:
    """Group a path-length-sorted catalog, head first.

    Once a head has been grouped, the remaining entries with its signature
    and every entry whose path starts with the head's path are dropped, so
    nested directories of a matched pair do not form groups of their own.
    """
    groups: list[DuplicateGroup] = []
    remaining = list(dirsigs)
    while remaining:
        head, tail = remaining[0], remaining[1:]
        group = find_duplicates(head, tail)
        if group is None:
            remaining = tail
            continue
        logger.debug(f"group of {len(group.members)} at {group.signature.describe()}")
        groups.append(group)
        remaining = [
            d for d in tail
            if d.signature != head.signature and not d.path.startswith(head.path)
        ]
    return groups


def sort_groups(groups: list[DuplicateGroup]) -> list[DuplicateGroup]:
    """Order groups by the total size of their head, smallest first (stable)."""
    return sorted(groups, key=lambda g: g.total_size)
