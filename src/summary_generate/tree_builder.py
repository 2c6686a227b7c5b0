"""Walk a source directory and build the chapter tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from summary_generate.config import MARKDOWN_SUFFIX, RESERVED_FILENAMES, SKIPPED_DIRECTORIES
from summary_generate.exceptions import TraversalError
from summary_generate.index_resolver import read_text_or_empty, resolve_index_content
from summary_generate.naming import display_name, extract_category
from summary_generate.numbering import assign_numbers
from summary_generate.ordering import reorder
from summary_generate.schemas import BookItem, Chapter

logger = logging.getLogger(__name__)


def build_outline(root_dir: Path) -> list[BookItem]:
    """Build the complete, numbered outline for a source directory.

    Args:
        root_dir: Book source directory (usually ``<book root>/src``).

    Returns:
        Top-level book items, sorted, grouped and numbered.

    Raises:
        TraversalError: If any directory in the tree cannot be listed.
    """
    logger.info("Building outline from %s", root_dir)
    items = build_children(root_dir, root_dir, [])
    assign_numbers([], items)
    logger.info("Outline built with %d top-level items", len(items))
    return items


def build_children(directory: Path, root_dir: Path, parent_names: Sequence[str]) -> list[BookItem]:
    """Build the sorted and grouped child items of one directory.

    Subdirectories become chapters whose body comes from their index file;
    ``.md`` files other than README/INDEX/SUMMARY become leaf chapters.
    Directories named ``book`` or ``images`` are skipped with everything
    below them.

    Args:
        directory: Directory to list.
        root_dir: Source root; chapter paths are relative to it.
        parent_names: Display names of the chapters enclosing ``directory``.

    Returns:
        Child items in final order, not yet numbered.

    Raises:
        TraversalError: If ``directory`` or a subdirectory cannot be listed.
    """
    if _is_skipped_directory(directory):
        return []

    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise TraversalError(f"Failed to list directory {directory}: {exc}") from exc

    chapters: list[Chapter] = []
    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError as exc:
            raise TraversalError(f"Failed to inspect {entry}: {exc}") from exc
        if is_dir:
            if _is_skipped_directory(entry):
                continue
            chapters.append(_directory_chapter(entry, root_dir, parent_names))
        elif _is_chapter_file(entry):
            chapters.append(_file_chapter(entry, root_dir, parent_names))

    return reorder(chapters)


def _directory_chapter(directory: Path, root_dir: Path, parent_names: Sequence[str]) -> Chapter:
    name = display_name(directory.name)
    content, path = resolve_index_content(directory, directory.relative_to(root_dir))
    sub_items = build_children(directory, root_dir, [*parent_names, name])
    category, _ = extract_category(directory.name)
    return Chapter(
        name=name,
        content=content,
        path=path,
        source_path=path,
        parent_names=list(parent_names),
        sub_items=sub_items,
        category=category,
        file_name=directory.name,
    )


def _file_chapter(file_path: Path, root_dir: Path, parent_names: Sequence[str]) -> Chapter:
    relative = file_path.relative_to(root_dir)
    category, _ = extract_category(file_path.name)
    return Chapter(
        name=display_name(file_path.name),
        content=read_text_or_empty(file_path),
        path=relative,
        source_path=relative,
        parent_names=list(parent_names),
        category=category,
        file_name=file_path.name,
    )


def _is_skipped_directory(directory: Path) -> bool:
    return directory.name in SKIPPED_DIRECTORIES


def _is_chapter_file(path: Path) -> bool:
    return path.suffix == MARKDOWN_SUFFIX and path.name.lower() not in RESERVED_FILENAMES
