"""Book outline models mirroring mdBook's JSON book structure."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, Field, field_serializer, field_validator


class Separator(BaseModel):
    """Group boundary marker, rendered by mdBook as a horizontal rule."""


class PartTitle(BaseModel):
    """Unnumbered heading introducing a category group."""

    label: str


class Chapter(BaseModel):
    """A chapter in the generated outline.

    Attributes:
        name: Display name with the ordering prefix removed.
        content: Raw Markdown body. Empty when nothing could be read.
        number: Hierarchical position, None until numbering has run.
        sub_items: Ordered child items, including group markers.
        path: Path relative to the source root.
        source_path: Same as path; mdBook uses it to locate the original file.
        parent_names: Display names of all ancestors, outermost first.
        category: Category tag parsed from the on-disk name. Not serialized.
        file_name: On-disk entry name, used as the sort tie-break. Not serialized.
    """

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list[BookItem] = Field(default_factory=list)
    path: Path | None = None
    source_path: Path | None = None
    parent_names: list[str] = Field(default_factory=list)
    category: str = Field(default="", exclude=True)
    file_name: str = Field(default="", exclude=True)

    @field_validator("sub_items", mode="before")
    @classmethod
    def decode_sub_items(cls, v: list[Any] | None) -> list[Any]:
        """Accept mdBook's externally tagged item encoding."""
        return [decode_item(item) for item in v or []]

    @field_serializer("sub_items")
    def encode_sub_items(self, items: list[BookItem]) -> list[Any]:
        return [encode_item(item) for item in items]


BookItem = Union[Chapter, Separator, PartTitle]


class Book(BaseModel):
    """A book as exchanged with mdBook.

    Only ``sections`` is interpreted. Every other top-level key of the input
    is kept in ``extra_fields`` and written back untouched.
    """

    sections: list[BookItem] = Field(default_factory=list)
    extra_fields: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @field_validator("sections", mode="before")
    @classmethod
    def decode_sections(cls, v: list[Any] | None) -> list[Any]:
        """Accept mdBook's externally tagged item encoding."""
        return [decode_item(item) for item in v or []]

    @classmethod
    def from_json(cls, raw: Any) -> Book:
        """Build a book from the decoded JSON object sent by mdBook."""
        if not isinstance(raw, dict):
            raise ValueError(f"Expected a JSON object for the book, got {type(raw).__name__}")
        extra = {key: value for key, value in raw.items() if key != "sections"}
        return cls(sections=raw.get("sections") or [], extra_fields=extra)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON-ready book, with pass-through keys preserved."""
        payload: dict[str, Any] = {"sections": [encode_item(item) for item in self.sections]}
        payload.update(self.extra_fields)
        return payload


def decode_item(raw: Any) -> Any:
    """Convert one externally tagged book item into its model.

    Already-built models are returned unchanged.
    """
    if isinstance(raw, (Chapter, Separator, PartTitle)):
        return raw
    if raw == "Separator":
        return Separator()
    if isinstance(raw, dict) and len(raw) == 1:
        tag, payload = next(iter(raw.items()))
        if tag == "Chapter":
            return Chapter.model_validate(payload)
        if tag == "PartTitle":
            return PartTitle(label=payload)
    raise ValueError(f"Unknown book item: {raw!r}")


def encode_item(item: BookItem) -> Any:
    """Convert one book item into mdBook's externally tagged encoding."""
    if isinstance(item, Chapter):
        return {"Chapter": item.model_dump(mode="json")}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.label}
    return "Separator"


Chapter.model_rebuild()
Book.model_rebuild()
