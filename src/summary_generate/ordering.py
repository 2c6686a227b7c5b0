"""Sibling ordering and category grouping."""

from __future__ import annotations

from typing import Iterable

from summary_generate.naming import extract_category, trim_ordering_prefix
from summary_generate.schemas import BookItem, Chapter, PartTitle, Separator


def chapter_sort_key(chapter: Chapter) -> tuple[str, str]:
    """Sort key: category tag first, then the raw on-disk name."""
    return chapter.category, chapter.file_name


def chapter_identity(chapter: Chapter) -> tuple[str, str]:
    """Equality key for de-duplication; differs from the sort key on purpose."""
    return chapter.category, chapter.name


def reorder(chapters: Iterable[Chapter]) -> list[BookItem]:
    """Sort sibling chapters and insert a group header before each new category.

    Every category change emits a ``Separator`` and a ``PartTitle`` right
    before the first chapter of the group. Untagged chapters sort first and
    get no header.
    """
    items: list[BookItem] = []
    current_category = ""
    for chapter in sorted(chapters, key=chapter_sort_key):
        category, _ = extract_category(chapter.file_name)
        if category != current_category:
            items.append(Separator())
            items.append(PartTitle(label=trim_ordering_prefix(category)))
            current_category = category
        items.append(chapter)
    return items
