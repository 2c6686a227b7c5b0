"""Shared schemas for summary-generate."""

from summary_generate.schemas.book import Book, BookItem, Chapter, PartTitle, Separator
from summary_generate.schemas.context import PreprocessorContext

__all__ = ["Book", "BookItem", "Chapter", "PartTitle", "PreprocessorContext", "Separator"]
