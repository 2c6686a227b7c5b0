"""Command-line entry point for the summary-generate preprocessor."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from summary_generate.config import PREPROCESSOR_NAME
from summary_generate.exceptions import SummaryGenerateError
from summary_generate.outline_formatter import format_outline
from summary_generate.preprocessor import Preprocessor, SummaryGenerate
from summary_generate.protocol import handle_preprocessing
from summary_generate.tree_builder import build_outline
from summary_generate.utils.logging_config import LOG_LEVEL_CHOICES, configure_logging, get_logger

logger = get_logger(__name__)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"mdbook-{PREPROCESSOR_NAME}",
        description="An mdBook preprocessor that builds SUMMARY sections from the source directory tree.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        help="Logging level for stderr output",
    )
    subparsers = parser.add_subparsers(dest="command")

    supports = subparsers.add_parser(
        "supports", help="Check whether a renderer is supported by this preprocessor"
    )
    supports.add_argument("renderer")

    tree = subparsers.add_parser("tree", help="Print the outline generated for a source directory")
    tree.add_argument("directory", type=Path)
    return parser


def handle_supports(preprocessor: Preprocessor, renderer: str) -> int:
    # mdBook reads support from the exit status.
    return 0 if preprocessor.supports_renderer(renderer) else 1


def handle_tree(directory: Path) -> int:
    if not directory.is_dir():
        print(f"Not a directory: {directory}", file=sys.stderr)
        return 1
    print(format_outline(build_outline(directory)))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    preprocessor = SummaryGenerate()
    if args.command == "supports":
        return handle_supports(preprocessor, args.renderer)

    try:
        if args.command == "tree":
            return handle_tree(args.directory)
        handle_preprocessing(preprocessor, sys.stdin, sys.stdout)
    except SummaryGenerateError as exc:
        logger.debug("Preprocessing failed", exc_info=True)
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
