"""The summary-generate mdBook preprocessor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from summary_generate.config import (
    PREPROCESSOR_NAME,
    SUMMARY_GENERATE_SOURCE_DIR,
    UNSUPPORTED_RENDERER,
)
from summary_generate.schemas import Book, PreprocessorContext
from summary_generate.tree_builder import build_outline

logger = logging.getLogger(__name__)


@runtime_checkable
class Preprocessor(Protocol):
    """Protocol for mdBook preprocessors."""

    def name(self) -> str:
        """Name used in book.toml and in log messages."""
        ...

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Return the processed book."""
        ...

    def supports_renderer(self, renderer: str) -> bool:
        """Check whether this preprocessor should run for a renderer."""
        ...


class SummaryGenerate:
    """Replaces the book's sections with an outline generated from the source tree."""

    def __init__(self, source_dir: str | None = None) -> None:
        self._source_dir = source_dir if source_dir is not None else SUMMARY_GENERATE_SOURCE_DIR

    def name(self) -> str:
        return PREPROCESSOR_NAME

    def source_root(self, ctx: PreprocessorContext) -> Path:
        """Directory the outline is generated from."""
        return ctx.root / (self._source_dir or ctx.book_source_dir)

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Generate the outline and return a copy of ``book`` carrying it.

        Raises:
            TraversalError: If the source tree cannot be listed.
        """
        root = self.source_root(ctx)
        logger.info("Running %s for renderer %s on %s", self.name(), ctx.renderer, root)
        sections = build_outline(root)
        return book.model_copy(update={"sections": sections})

    def supports_renderer(self, renderer: str) -> bool:
        return renderer != UNSUPPORTED_RENDERER
