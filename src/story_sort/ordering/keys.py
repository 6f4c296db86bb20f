"""Path decomposition for story comparison.

A story is compared as a sequence of keys: each segment of its group path
in order, followed by its name. Every key keeps the text as shown to the
user (``display``) and the lower-cased form used for order tree lookups
(``lookup``).
"""

from typing import NamedTuple

GROUP_SEPARATOR = "/"


class PathKey(NamedTuple):
    """A single level of a story path.

    Attributes:
        display: Original text, used for alphabetical fallback.
        lookup: Lower-cased text, used for order tree lookups and equality.

    """

    display: str
    lookup: str


def make_key(text: str | None) -> PathKey:
    """Build a key from raw text, treating None as empty."""
    display = text or ""
    return PathKey(display, display.lower())


def decompose(group: str | None, name: str | None) -> tuple[PathKey, ...]:
    """Split a story into its comparison keys.

    Args:
        group: Slash-delimited group path ("" or None for ungrouped stories).
        name: Leaf display name.

    Returns:
        Keys for every group segment followed by the name. Always at least
        two keys long, since an empty group yields a single "" segment.

    Examples:
        >>> [k.lookup for k in decompose("Components/Header", "Default")]
        ['components', 'header', 'default']
        >>> [k.lookup for k in decompose("", "Story")]
        ['', 'story']

    """
    segments = (group or "").split(GROUP_SEPARATOR)
    return tuple(make_key(segment) for segment in segments) + (make_key(name),)
