"""Directory tree building without following symbolic links."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import logging
import os
import stat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class File:
    """A regular file and its size at classification time."""

    name: str
    size: int


@dataclass(frozen=True)
class Directory:
    """A directory with its absolute path and children in listing order."""

    path: str
    children: tuple[FileTreeNode, ...] = ()


@dataclass(frozen=True)
class Inaccessible:
    """An entry that could not be classified (stat error, symlink, device, ...)."""

    name: str


FileTreeNode = File | Directory | Inaccessible


def _list_directory(path: str) -> list[str]:
    try:
        return os.listdir(path)
    except OSError as e:
        logger.warning(f"['{path}'] cannot enter directory: {e.strerror or e}")
        return []


def _open_directory(path: str, progress=None) -> tuple[str, Iterator[str], list[FileTreeNode]]:
    logger.debug(f"entering {path}")
    if progress is not None:
        progress.update(1)
    return path, iter(_list_directory(path)), []


def _classify(full: str, name: str) -> FileTreeNode | None:
    """Return the leaf node for *full*, or None when it is a directory."""
    try:
        st = os.lstat(full)
    except OSError as e:
        logger.warning(f"['{full}'] {e.strerror or e}")
        return Inaccessible(name)

    if stat.S_ISREG(st.st_mode):
        return File(name, st.st_size)
    if stat.S_ISDIR(st.st_mode):
        return None
    logger.debug(f"skipping unsupported entry {full}")
    return Inaccessible(name)


def _build_directory(root: str, progress=None) -> Directory:
    # One frame per open directory: (path, remaining names, children so far)
    stack = [_open_directory(root, progress)]
    while True:
        path, names, children = stack[-1]
        name = next(names, None)
        if name is None:
            stack.pop()
            node = Directory(path, tuple(children))
            if not stack:
                return node
            stack[-1][2].append(node)
            continue

        full = os.path.join(path, name)
        leaf = _classify(full, name)
        if leaf is None:
            stack.append(_open_directory(full, progress))
        else:
            children.append(leaf)


def build_tree(path: str | os.PathLike, progress=None) -> Directory:
    """Walk *path* into an immutable tree of File/Directory/Inaccessible nodes.

    Never raises for filesystem errors: unreadable entries become
    ``Inaccessible``, unreadable directories get no children, and a root that
    cannot be entered yields an empty ``Directory`` at the current working
    directory. Nesting depth is not limited by the interpreter's recursion
    limit. *progress* (a tqdm bar) is advanced once per directory.
    """
    root = os.path.realpath(os.fspath(path))
    if not os.path.isdir(root):
        logger.warning(f"['{os.fspath(path)}'] not an accessible directory")
        return Directory(os.getcwd())
    return _build_directory(root, progress)


def walk(node: FileTreeNode) -> Iterator[tuple[int, FileTreeNode]]:
    """Yield ``(depth, node)`` for *node* and all its descendants, pre-order."""
    stack = [(0, node)]
    while stack:
        depth, current = stack.pop()
        yield depth, current
        if isinstance(current, Directory):
            stack.extend((depth + 1, child) for child in reversed(current.children))


def format_tree(node: FileTreeNode) -> list[str]:
    """Render *node* one line per entry, indented by depth (debugging aid)."""
    lines = []
    for depth, current in walk(node):
        indent = " " * (depth + 1)
        if isinstance(current, File):
            lines.append(f"{indent}file: {current.name}")
        elif isinstance(current, Directory):
            lines.append(f"{indent}dir: {current.path}")
    return lines
