"""Flatten a tree into significant directory signatures, shortest paths first."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import logging
import os

from dirdupes.signature import Signature, aggregate
from dirdupes.tree import Directory, FileTreeNode, build_tree, walk

logger = logging.getLogger(__name__)

SIGNIFICANT_SIZE = 1024 * 10
SIGNIFICANT_FILES = 10
SIGNIFICANT_DIRS = 10


@dataclass(frozen=True)
class DirSignature:
    """A directory path paired with the signature of its subtree."""

    path: str
    signature: Signature


def collect_signatures(node: FileTreeNode) -> list[DirSignature]:
    """Return one DirSignature per directory in *node*, in pre-order."""
    return [
        DirSignature(current.path, aggregate(current))
        for _, current in walk(node)
        if isinstance(current, Directory)
    ]


def is_significant(dirsig: DirSignature) -> bool:
    sig = dirsig.signature
    return (
        sig.total_size > SIGNIFICANT_SIZE
        or sig.file_count > SIGNIFICANT_FILES
        or sig.dir_count > SIGNIFICANT_DIRS
    )


def catalog(tree: FileTreeNode) -> list[DirSignature]:
    """Significant directories of *tree*, sorted by path length in bytes (stable)."""
    dirsigs = collect_signatures(tree)
    significant = [d for d in dirsigs if is_significant(d)]
    logger.debug(f"{len(dirsigs)} directories, {len(significant)} significant")
    # Grouper relies on a directory preceding everything it is a prefix of
    return sorted(significant, key=lambda d: len(os.fsencode(d.path)))


def read_all_dirsigs(
    path: str | os.PathLike,
    progress=None,
    on_tree: Callable[[Directory], None] | None = None,
) -> list[DirSignature]:
    """Scan *path* and return its catalog.

    This is the whole scanning pipeline; the CLI goes through it too.
    *on_tree* is called with the built tree before it is cataloged.
    """
    tree = build_tree(path, progress=progress)
    if on_tree is not None:
        on_tree(tree)
    return catalog(tree)
