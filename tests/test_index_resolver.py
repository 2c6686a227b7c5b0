"""Tests for index file resolution."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from summary_generate.exceptions import TraversalError
from summary_generate.index_resolver import read_text_or_empty, resolve_index_content


class TestResolveIndexContent:
    """Tests for resolve_index_content."""

    def test_prefers_index_over_readme(self, tmp_path: Path) -> None:
        """INDEX.md wins when both INDEX.md and README.md exist."""
        (tmp_path / "INDEX.md").write_text("index body")
        (tmp_path / "README.md").write_text("readme body")

        content, path = resolve_index_content(tmp_path, Path("guide"))

        assert content == "index body"
        assert path == Path("guide/INDEX.md")

    def test_uses_readme_when_no_index(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("readme body")

        content, path = resolve_index_content(tmp_path, Path("guide"))

        assert content == "readme body"
        assert path == Path("guide/README.md")

    @pytest.mark.parametrize("candidate", ["index.md", "readme.md"])
    def test_accepts_lowercase_candidates(self, tmp_path: Path, candidate: str) -> None:
        (tmp_path / candidate).write_text("lower body")

        content, path = resolve_index_content(tmp_path, Path("guide"))

        assert content == "lower body"
        assert path.parent == Path("guide")
        assert path.name.lower() == candidate

    def test_no_candidate_keeps_directory_path(self, tmp_path: Path) -> None:
        (tmp_path / "chapter.md").write_text("not an index")

        content, path = resolve_index_content(tmp_path, Path("guide"))

        assert content == ""
        assert path == Path("guide")

    def test_unreadable_index_gives_empty_content(self, tmp_path: Path) -> None:
        """An existing but undecodable index still wins, with empty content."""
        (tmp_path / "INDEX.md").write_bytes(b"\xff\xfe\x00broken")
        (tmp_path / "README.md").write_text("readme body")

        content, path = resolve_index_content(tmp_path, Path("guide"))

        assert content == ""
        assert path == Path("guide/INDEX.md")


class TestReadTextOrEmpty:
    """Tests for read_text_or_empty."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "note.md"
        path.write_text("Café", encoding="utf-8")
        assert read_text_or_empty(path) == "Café"

    def test_missing_file_gives_empty(self, tmp_path: Path) -> None:
        assert read_text_or_empty(tmp_path / "missing.md") == ""

    def test_os_error_gives_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "note.md"
        path.write_text("body")
        with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
            assert read_text_or_empty(path) == ""

    def test_directory_gives_empty(self, tmp_path: Path) -> None:
        assert read_text_or_empty(tmp_path) == ""

    def test_keeps_line_endings(self, tmp_path: Path) -> None:
        """CRLF and lone CR survive the read unchanged."""
        path = tmp_path / "note.md"
        path.write_bytes(b"a\r\nb\rc")
        assert read_text_or_empty(path) == "a\r\nb\rc"


class TestIndexLineEndings:
    """Index bodies are returned byte-exact."""

    def test_index_body_keeps_line_endings(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_bytes(b"x\r\ny\rz")

        content, _ = resolve_index_content(tmp_path, Path("guide"))

        assert content == "x\r\ny\rz"


class TestIndexInspectionFailure:
    """A candidate that cannot be stat'ed is fatal."""

    def test_exists_error_raises_traversal_error(self, tmp_path: Path) -> None:
        with patch.object(Path, "exists", side_effect=PermissionError("denied")):
            with pytest.raises(TraversalError, match="Failed to inspect") as exc_info:
                resolve_index_content(tmp_path, Path("guide"))

        assert isinstance(exc_info.value.__cause__, PermissionError)
