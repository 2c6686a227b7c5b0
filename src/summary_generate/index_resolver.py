"""Resolve a directory's body text from its index file."""

from __future__ import annotations

import logging
from pathlib import Path

from summary_generate.config import INDEX_CANDIDATES
from summary_generate.exceptions import TraversalError

logger = logging.getLogger(__name__)


def read_text_or_empty(path: Path) -> str:
    """Read a UTF-8 file byte-exact, returning an empty string on any read failure.

    Line endings are kept as stored; no newline translation is applied.
    """
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Could not read %s, using empty content: %s", path, exc)
        return ""


def resolve_index_content(directory: Path, relative: Path) -> tuple[str, Path]:
    """Pick the body text of a directory from its index file.

    Candidates are tried in INDEX_CANDIDATES order and the first one that
    exists wins, even if it then fails to read.

    Args:
        directory: Directory on disk.
        relative: Path of ``directory`` relative to the source root.

    Returns:
        Tuple of (content, path) where path is ``relative`` joined with the
        chosen index filename, or ``relative`` itself if no candidate exists.

    Raises:
        TraversalError: If a candidate cannot be checked for existence.
    """
    for candidate in INDEX_CANDIDATES:
        index_path = directory / candidate
        try:
            exists = index_path.exists()
        except OSError as exc:
            raise TraversalError(f"Failed to inspect {index_path}: {exc}") from exc
        if exists:
            return read_text_or_empty(index_path), relative / candidate
    return "", relative
