"""mdBook preprocessor protocol: read input, check versions, write output."""

from __future__ import annotations

import json
import logging
import re
from typing import TextIO

from pydantic import ValidationError

from summary_generate.config import SUMMARY_GENERATE_MDBOOK_VERSION
from summary_generate.exceptions import ProtocolError, SerializationError
from summary_generate.preprocessor import Preprocessor
from summary_generate.schemas import Book, PreprocessorContext

logger = logging.getLogger(__name__)

_SEMVER_RE = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)


def parse_input(stream: TextIO) -> tuple[PreprocessorContext, Book]:
    """Decode the ``[context, book]`` pair mdBook writes to stdin.

    Raises:
        ProtocolError: If the input is not valid JSON or has the wrong shape.
    """
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"Unable to parse the input: {exc}") from exc

    if not isinstance(payload, list) or len(payload) != 2:
        raise ProtocolError("Expected a JSON array of [context, book] on stdin")

    raw_ctx, raw_book = payload
    try:
        ctx = PreprocessorContext.model_validate(raw_ctx)
        book = Book.from_json(raw_book)
    except (ValidationError, ValueError) as exc:
        raise ProtocolError(f"Unable to parse the input: {exc}") from exc
    return ctx, book


def write_output(book: Book, stream: TextIO) -> None:
    """Serialize the processed book to ``stream``.

    Raises:
        SerializationError: If the book cannot be encoded or written.
    """
    try:
        encoded = json.dumps(book.to_json())
        stream.write(encoded)
        stream.flush()
    except (TypeError, ValueError, OSError) as exc:
        raise SerializationError(f"Unable to write the processed book: {exc}") from exc


def parse_version(version: str) -> tuple[int, int, int, str | None]:
    """Parse a semantic version into (major, minor, patch, pre-release).

    Raises:
        ProtocolError: If ``version`` is not a valid semantic version.
    """
    match = _SEMVER_RE.match(version.strip())
    if not match:
        raise ProtocolError(f"Invalid version string: {version!r}")
    return (
        int(match.group("major")),
        int(match.group("minor")),
        int(match.group("patch")),
        match.group("pre"),
    )


def version_matches(actual: str, required: str) -> bool:
    """Check ``actual`` against the caret requirement ``^required``.

    The leftmost non-zero component must be equal and ``actual`` must not be
    older than ``required``. Pre-release versions never match.
    """
    major, minor, patch, pre = parse_version(actual)
    req_major, req_minor, req_patch, _ = parse_version(required)

    if pre is not None:
        return False
    if (major, minor, patch) < (req_major, req_minor, req_patch):
        return False
    if req_major > 0:
        return major == req_major
    if req_minor > 0:
        return major == 0 and minor == req_minor
    return (major, minor, patch) == (0, 0, req_patch)


def check_version(
    ctx: PreprocessorContext,
    preprocessor: Preprocessor,
    *,
    built_against: str = SUMMARY_GENERATE_MDBOOK_VERSION,
) -> bool:
    """Warn when the calling mdBook is not compatible with ``built_against``.

    Returns:
        True if the versions are compatible.

    Raises:
        ProtocolError: If either version string cannot be parsed.
    """
    if version_matches(ctx.mdbook_version, built_against):
        return True
    logger.warning(
        "The %s plugin was built against version %s of mdbook, "
        "but we're being called from version %s",
        preprocessor.name(),
        built_against,
        ctx.mdbook_version,
    )
    return False


def handle_preprocessing(preprocessor: Preprocessor, stdin: TextIO, stdout: TextIO) -> None:
    """Run one preprocessing round trip between mdBook and ``preprocessor``."""
    ctx, book = parse_input(stdin)
    check_version(ctx, preprocessor)
    processed = preprocessor.run(ctx, book)
    write_output(processed, stdout)
