"""Render a generated outline as plain text."""

from __future__ import annotations

from typing import Iterable

from summary_generate.schemas import BookItem, Chapter, PartTitle, Separator

_SEPARATOR_LINE = "---"


def format_outline(items: list[BookItem]) -> str:
    """Create an indented tree of the outline with chapter numbers and group headers."""
    tree = "Outline:\n" + _create_outline_tree(items)
    return tree + f"\nChapters: {count_chapters(items)}"


def count_chapters(items: Iterable[BookItem]) -> int:
    """Count chapters in the tree, ignoring group markers."""
    total = 0
    for item in items:
        if isinstance(item, Chapter):
            total += 1
            total += count_chapters(item.sub_items)
    return total


def format_number(number: list[int] | None) -> str:
    if not number:
        return ""
    return ".".join(str(part) for part in number) + "."


def _create_outline_tree(items: list[BookItem], indent: int = 0) -> str:
    lines: list[str] = []
    prefix = " " * (indent * 4)
    for item in items:
        if isinstance(item, Separator):
            lines.append(prefix + _SEPARATOR_LINE)
        elif isinstance(item, PartTitle):
            lines.append(prefix + f"# {item.label}")
        else:
            number = format_number(item.number)
            lines.append(prefix + (f"{number} {item.name}" if number else item.name))
            if item.sub_items:
                lines.append(_create_outline_tree(item.sub_items, indent + 1))
    return "\n".join(lines)
