"""Shared fixtures for dirdupes tests."""

import logging
import os
import pathlib

import pytest


def write_files(directory: pathlib.Path, sizes: list[int], prefix: str = "f") -> list[pathlib.Path]:
    """Create one file per entry of *sizes* with that many bytes."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for i, size in enumerate(sizes):
        p = directory / f"{prefix}{i}.bin"
        p.write_bytes(b"x" * size)
        paths.append(p)
    return paths


@pytest.fixture
def make_files():
    """Return the file-writing helper."""
    return write_files


@pytest.fixture
def tmp_root(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty scan root, resolved the way the tree builder resolves it."""
    root = tmp_path / "root"
    root.mkdir()
    return pathlib.Path(os.path.realpath(root))


@pytest.fixture
def twin_tree(tmp_root: pathlib.Path) -> pathlib.Path:
    """Two sibling directories A and B, each with 12 files totalling 5000 bytes."""
    sizes = [416] * 11 + [424]
    write_files(tmp_root / "A", sizes)
    write_files(tmp_root / "B", sizes, prefix="g")
    return tmp_root


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers configure_logging() bound to a test's captured streams."""
    yield
    logger = logging.getLogger("dirdupes")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def deep_tree(tmp_root: pathlib.Path) -> pathlib.Path:
    """A chain of 500 nested directories ending in one 20000-byte file.

    Returns the innermost directory. Built level by level so the fixture
    itself does not recurse.
    """
    leaf = tmp_root
    for _ in range(500):
        leaf = leaf / "a"
        leaf.mkdir()
    write_files(leaf, [20000])
    return leaf
