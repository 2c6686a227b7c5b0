"""summary-generate: build mdBook outlines from the source directory tree."""

from summary_generate.exceptions import (
    ProtocolError,
    SerializationError,
    SummaryGenerateError,
    TraversalError,
)
from summary_generate.naming import display_name, extract_category, trim_ordering_prefix
from summary_generate.preprocessor import Preprocessor, SummaryGenerate
from summary_generate.schemas import Book, BookItem, Chapter, PartTitle, PreprocessorContext, Separator
from summary_generate.tree_builder import build_outline

__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "PartTitle",
    "Preprocessor",
    "PreprocessorContext",
    "ProtocolError",
    "Separator",
    "SerializationError",
    "SummaryGenerate",
    "SummaryGenerateError",
    "TraversalError",
    "build_outline",
    "display_name",
    "extract_category",
    "trim_ordering_prefix",
]
