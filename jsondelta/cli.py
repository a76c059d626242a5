"""jsondelta CLI.

Entry point for the ``jsondelta`` command-line tool.

Usage:
    jsondelta <file_a> <file_b> [--color auto|always|never] [--positions a|b]
              [--show-unchanged] [--no-shortcut] [-v|-vv|-q]
"""

from __future__ import annotations

import argparse
import logging
import sys

from .core.document_diff import diff_documents
from .core.types import DiffPolicy
from .documents import DocumentError, load_document, same_content
from .render import COLOR_CHOICES, make_console, render_report, render_same
from .version import JSONDELTA_VERSION

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Parser and logging
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsondelta",
        description="jsondelta: structural diff of two JSON documents",
    )
    parser.add_argument("file_a", help="First (older) JSON file")
    parser.add_argument("file_b", help="Second (newer) JSON file")
    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default="auto",
        help="Colour the report (default: auto)",
    )
    parser.add_argument(
        "--positions",
        choices=["a", "b"],
        default="b",
        help="Which file orders the top-level listing (default: b)",
    )
    parser.add_argument(
        "--show-unchanged",
        action="store_true",
        help="List unchanged members inside nested diff trees",
    )
    parser.add_argument(
        "--no-shortcut",
        action="store_true",
        help="Diff even when both files have the same SHA-256 digest",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log critical errors",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {JSONDELTA_VERSION}"
    )
    return parser


def _log_level(verbose: int, quiet: bool) -> int:
    if quiet:
        return logging.CRITICAL
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=_log_level(args.verbose, args.quiet),
        format="%(message)s",
    )
    console = make_console(args.color)

    try:
        if not args.no_shortcut and same_content(args.file_a, args.file_b):
            render_same(console)
            return
        doc_a = load_document(args.file_a)
        doc_b = load_document(args.file_b)
    except DocumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    policy = DiffPolicy(
        include_unchanged=args.show_unchanged,
        position_source=args.positions,
    )
    report = diff_documents(doc_a.value, doc_b.value, doc_a.text, doc_b.text, policy)
    if not report.has_differences:
        logger.info("no structural differences")
    render_report(report, console)


if __name__ == "__main__":
    main()
