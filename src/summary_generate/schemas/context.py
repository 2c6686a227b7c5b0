"""Preprocessor context model."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from summary_generate.config import DEFAULT_SOURCE_DIR


class PreprocessorContext(BaseModel):
    """Context mdBook sends alongside the book.

    Attributes:
        root: Book root directory (the one holding book.toml).
        config: Parsed book.toml.
        renderer: Name of the renderer the book is being prepared for.
        mdbook_version: Version of the calling mdBook.
    """

    model_config = ConfigDict(extra="allow")

    root: Path
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str
    mdbook_version: str

    @property
    def book_source_dir(self) -> str:
        """Source directory from ``[book] src``, relative to ``root``."""
        book_config = self.config.get("book") or {}
        return book_config.get("src") or DEFAULT_SOURCE_DIR
