"""
Rich-based rendering of a DiffReport.

Output layout:
    The First File is Less in Length (24 vs 31)
    Difference found in key: tags
    --- Diff for key 'tags' ---
    |__+ [2]
    --------------------------
    1 | ~ name
    2 | ~ tags

Every label carries a marker (- only in A, + only in B, ~ changed) so the
report reads the same with colour turned off. Keys are always passed to rich
as Text, never as markup.
"""
from __future__ import annotations

from typing import Dict, Optional

from rich.console import Console
from rich.text import Text

from .core.types import Change, DiffRecord, DiffReport, KeyEntry, Segment

COLOR_CHOICES = ("auto", "always", "never")

STYLES: Dict[Change, str] = {
    Change.ADDED_ON_LEFT: "red",
    Change.ADDED_ON_RIGHT: "green",
    Change.CHANGED: "blue",
    Change.UNCHANGED: "white",
}

MARKERS: Dict[Change, str] = {
    Change.ADDED_ON_LEFT: "-",
    Change.ADDED_ON_RIGHT: "+",
    Change.CHANGED: "~",
    Change.UNCHANGED: " ",
}

INDENT = "  "
BRANCH = "|__"
SECTION_FOOTER = "-" * 26
SAME_FILES_MESSAGE = "Files are the same!"


def make_console(color: str = "auto") -> Console:
    """Build the stdout console for a colour mode (auto, always or never)."""
    if color not in COLOR_CHOICES:
        raise ValueError(f"color must be one of {COLOR_CHOICES}, got {color!r}")
    if color == "always":
        return Console(force_terminal=True, highlight=False, soft_wrap=True)
    if color == "never":
        return Console(color_system=None, highlight=False, soft_wrap=True)
    return Console(highlight=False, soft_wrap=True)


def format_segment(segment: Optional[Segment]) -> str:
    if segment is None:
        return "$"
    if isinstance(segment, int):
        return f"[{segment}]"
    return segment


def styled_label(segment: Optional[Segment], change: Change) -> Text:
    """Marker plus label, styled by classification."""
    return Text(f"{MARKERS[change]} {format_segment(segment)}", style=STYLES[change])


def tree_line(record: DiffRecord) -> Text:
    """One line of a nested diff tree.

    Records under a top-level key have depth >= 2; depth 2 is unindented.
    """
    indent = INDENT * max(record.depth - 2, 0)
    line = Text(f"{indent}{BRANCH}")
    line.append_text(styled_label(record.segment, record.change))
    return line


def render_length(report: DiffReport, console: Console) -> None:
    console.print(
        f"The First File is {report.length_order} in Length "
        f"({report.size_a} vs {report.size_b})"
    )


def render_entry_diff(entry: KeyEntry, console: Console) -> None:
    """Header, nested tree and footer for one changed top-level entry."""
    label = format_segment(entry.segment)
    header = Text("Difference found in key: ")
    header.append(label, style=STYLES[Change.CHANGED])
    console.print(header)
    console.print(Text(f"--- Diff for key '{label}' ---"))
    for record in entry.records:
        console.print(tree_line(record))
    console.print(SECTION_FOOTER)


def render_listing(report: DiffReport, console: Console) -> None:
    """Numbered, position-ordered listing of every top-level entry."""
    for i, entry in enumerate(report.ordered, start=1):
        line = Text(f"{i} | ")
        line.append_text(styled_label(entry.segment, entry.change))
        console.print(line)


def render_report(report: DiffReport, console: Console) -> None:
    render_length(report, console)
    for entry in report.changed_entries:
        render_entry_diff(entry, console)
    render_listing(report, console)


def render_same(console: Console) -> None:
    console.print(SAME_FILES_MESSAGE)
