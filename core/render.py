"""
Text rendering of change lists.

Changes are sorted by path and written one per line, prefixed with
"+ ", "- " or "~ ". Nested values are written as indented YAML blocks.
Color only wraps existing text in ANSI escapes; stripping them gives the
exact uncolored output.
"""
from typing import Optional
from dataclasses import dataclass

import yaml

from core.comparison import Change, ChangeType
from core.value import Mapping, Null, Scalar, ScalarKind, Sequence, Value, text_of, to_python

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RESET = "\033[0m"

NO_CHANGES = "No changes found.\n"
ARROW = "→"

_MARKERS = {
    ChangeType.ADDITION: ("+ ", GREEN),
    ChangeType.DELETION: ("- ", RED),
    ChangeType.MODIFICATION: ("~ ", YELLOW),
}


@dataclass(frozen=True)
class RenderOptions:
    """Display switches, passed explicitly to every rendering call."""
    color: bool = True
    show_comments: bool = True
    show_separators: bool = True
    indent: int = 3


class _IndentedDumper(yaml.SafeDumper):
    """Indent sequences nested in mappings, like most YAML emitters do."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def paint(content: str, color: str, options: RenderOptions) -> str:
    if not options.color or not content:
        return content
    return f"{color}{content}{RESET}"


def format_value(value: Value, indent: int = 3) -> str:
    """Format a value for display; mappings and sequences become YAML blocks."""
    match value:
        case Null():
            return "null"
        case Scalar():
            return text_of(value)
        case Mapping() | Sequence():
            dumped = yaml.dump(
                to_python(value),
                Dumper=_IndentedDumper,
                indent=indent,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                width=4096,
            )
            return dumped.rstrip("\n")


def _block_lines(formatted: str, marker: str, indent: int) -> list[str]:
    lines = []
    padding = " " * indent
    for line in formatted.split("\n"):
        if line.strip():
            lines.append(f"{marker}{padding}{line}")
        else:
            lines.append(marker)
    return lines


def _is_block(value: Value, formatted: str) -> bool:
    match value:
        case Mapping(entries=entries):
            return bool(entries)
        case Sequence(items=items):
            return bool(items)
        case _:
            return "\n" in formatted


def _is_text(value: Optional[Value]) -> bool:
    return isinstance(value, Scalar) and value.kind == ScalarKind.TEXT


def _render_single(change: Change, value: Value, options: RenderOptions) -> list[str]:
    symbol, color = _MARKERS[change.change_type]
    marker = paint(symbol, color, options)
    formatted = format_value(value, options.indent)
    if not _is_block(value, formatted):
        return [f"{marker}{change.path}: {formatted}"]
    return [f"{marker}{change.path}:"] + _block_lines(formatted, marker, options.indent)


def _render_modification(change: Change, options: RenderOptions) -> list[str]:
    symbol, color = _MARKERS[ChangeType.MODIFICATION]
    marker = paint(symbol, color, options)
    old_text = format_value(change.old_value, options.indent)
    new_text = format_value(change.new_value, options.indent)

    if _is_block(change.old_value, old_text) or _is_block(change.new_value, new_text):
        return (
            [f"{marker}{change.path}:"]
            + _block_lines(old_text, marker, options.indent)
            + [f"{marker}{' ' * options.indent}{ARROW}"]
            + _block_lines(new_text, marker, options.indent)
        )

    # Text values are colored whole, no character-level diff
    if _is_text(change.old_value) and _is_text(change.new_value):
        old_text = paint(old_text, RED, options)
        new_text = paint(new_text, GREEN, options)
    return [f"{marker}{change.path}: {old_text} {ARROW} {new_text}"]


def render(changes: list[Change], options: Optional[RenderOptions] = None) -> str:
    """
    Render changes as a line-oriented report.

    Args:
        changes: Changes in any order
        options: Display switches (defaults to RenderOptions())

    Returns:
        The report text, newline terminated
    """
    options = options or RenderOptions()
    if not changes:
        return NO_CHANGES

    lines = []
    for change in sorted(changes, key=lambda c: c.path):
        if change.change_type == ChangeType.ADDITION:
            lines.extend(_render_single(change, change.new_value, options))
        elif change.change_type == ChangeType.DELETION:
            lines.extend(_render_single(change, change.old_value, options))
        else:
            lines.extend(_render_modification(change, options))

    return "".join(f"{line}\n" for line in lines)
