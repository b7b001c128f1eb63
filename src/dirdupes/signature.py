"""Structural signatures: total size, file count and directory count."""

from __future__ import annotations

from dataclasses import dataclass

from dirdupes.tree import Directory, File, FileTreeNode, walk


@dataclass(frozen=True)
class Signature:
    """Coarse equality key for a directory subtree."""

    total_size: int = 0
    file_count: int = 0
    dir_count: int = 0

    def __add__(self, other: Signature) -> Signature:
        return Signature(
            total_size=self.total_size + other.total_size,
            file_count=self.file_count + other.file_count,
            dir_count=self.dir_count + other.dir_count,
        )

    def describe(self) -> str:
        return f"size = {self.total_size}, files = {self.file_count}, dirs = {self.dir_count}"


ZERO = Signature()


def aggregate(node: FileTreeNode) -> Signature:
    """Fold a subtree into its signature.

    A directory counts itself once and adds the aggregate of every child;
    inaccessible entries contribute nothing.
    """
    total = ZERO
    for _, current in walk(node):
        if isinstance(current, File):
            total = total + Signature(total_size=current.size, file_count=1)
        elif isinstance(current, Directory):
            total = total + Signature(dir_count=1)
    return total
