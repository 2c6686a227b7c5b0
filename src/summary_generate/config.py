"""Local configuration for summary-generate."""

from __future__ import annotations

import os
from typing import Final


PREPROCESSOR_NAME: Final[str] = "summary-generate"
# Reserved renderer name used by mdBook's own tests to check the negative path.
UNSUPPORTED_RENDERER: Final[str] = "not-supported"

DEFAULT_SOURCE_DIR = "src"
DEFAULT_MDBOOK_VERSION = "0.4.35"
DEFAULT_LOG_LEVEL = "WARNING"

MARKDOWN_SUFFIX: Final[str] = ".md"
# Priority order matters: the first existing file provides the directory body.
INDEX_CANDIDATES: Final[tuple[str, ...]] = ("INDEX.md", "README.md", "index.md", "readme.md")
# Compared case-insensitively; these never become chapters of their own.
RESERVED_FILENAMES: Final[frozenset[str]] = frozenset({"readme.md", "index.md", "summary.md"})
SKIPPED_DIRECTORIES: Final[frozenset[str]] = frozenset({"book", "images"})

# Source directory relative to the book root; overrides `book.src` when set.
SUMMARY_GENERATE_SOURCE_DIR = os.getenv("SUMMARY_GENERATE_SOURCE_DIR") or None
SUMMARY_GENERATE_MDBOOK_VERSION = os.getenv("SUMMARY_GENERATE_MDBOOK_VERSION", DEFAULT_MDBOOK_VERSION)
SUMMARY_GENERATE_LOG_LEVEL = os.getenv("SUMMARY_GENERATE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
