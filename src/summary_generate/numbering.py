"""Hierarchical chapter numbering."""

from __future__ import annotations

from typing import Sequence

from summary_generate.schemas import BookItem, Chapter


def assign_numbers(prefix: Sequence[int], items: Sequence[BookItem]) -> None:
    """Stamp section numbers onto chapters, recursively.

    The index runs over the whole sequence, so separators and part titles use
    up a slot even though they are never numbered themselves. With the items
    ``[Separator, PartTitle, a, b]`` under an empty prefix, ``a`` is ``[2]``
    and ``b`` is ``[3]``. Order is never changed.
    """
    for index, item in enumerate(items):
        if not isinstance(item, Chapter):
            continue
        item.number = [*prefix, index]
        assign_numbers(item.number, item.sub_items)
