"""CLI argument parsing and scan dispatch."""

from __future__ import annotations

import argparse
import logging
import pathlib

from tqdm import tqdm

from dirdupes import __version__
from dirdupes.catalog import DirSignature, read_all_dirsigs
from dirdupes.grouper import group_duplicates, sort_groups
from dirdupes.logging import configure_logging
from dirdupes.report import format_report
from dirdupes.tree import Directory, format_tree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="dirdupes",
        description="Report directories that share total size, file count and subdirectory count.",
    )
    parser.add_argument(
        "path", nargs="?", type=pathlib.Path, default=None,
        help="Directory tree to scan (nothing is reported when omitted)",
    )
    parser.add_argument("--no-progress", action="store_true", help="Do not show a progress counter")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and the report")
    return parser


def _dump_tree(tree: Directory) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        for line in format_tree(tree):
            logger.debug(line)


def _scan(path: pathlib.Path, show_progress: bool) -> list[DirSignature]:
    logger.info(f"Scanning {path} ...")
    with tqdm(desc="Scanning", unit="dir", disable=not show_progress) as bar:
        return read_all_dirsigs(path, progress=bar, on_tree=_dump_tree)


def cmd_scan(args: argparse.Namespace) -> None:
    """Scan args.path and print every duplicate group to stdout."""
    if args.path is None:
        logger.debug("no path given, nothing to scan")
        dirsigs: list[DirSignature] = []
    else:
        dirsigs = _scan(args.path, show_progress=not (args.no_progress or args.quiet))

    groups = sort_groups(group_duplicates(dirsigs))
    logger.info(
        f"Found {len(groups)} duplicate group(s) among {len(dirsigs)} significant director"
        f"{'y' if len(dirsigs) == 1 else 'ies'}"
    )
    print(format_report(groups), end="")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)
    cmd_scan(args)
