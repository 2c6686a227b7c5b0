"""Name classification helpers: category tags and ordering prefixes."""

from __future__ import annotations

_ORDERING_CHARS = frozenset("0123456789.")


def extract_category(name: str) -> tuple[str, str]:
    """Split a name into its category tag and the remainder.

    The tag is everything before the first underscore. The remainder keeps
    the underscore. Names without an underscore, or starting with one, have
    no tag.

    >>> extract_category("guide_setup.md")
    ('guide', '_setup.md')
    >>> extract_category("setup.md")
    ('', 'setup.md')
    """
    index = name.find("_")
    if index > 0:
        return name[:index], name[index:]
    return "", name


def trim_ordering_prefix(name: str) -> str:
    """Drop leading ASCII digits and dots, e.g. ``"01.Intro"`` -> ``"Intro"``.

    A name made only of digits and dots trims to an empty string.
    """
    index = 0
    for char in name:
        if char not in _ORDERING_CHARS:
            break
        index += 1
    return name[index:]


def display_name(name: str) -> str:
    """Chapter title for an on-disk entry name.

    Falls back to the untouched name when trimming would leave nothing, so
    entries such as ``007`` keep a visible title.
    """
    return trim_ordering_prefix(name) or name
