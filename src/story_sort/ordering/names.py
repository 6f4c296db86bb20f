"""Name comparators used for alphabetical fallback.

A name comparator takes two display strings and returns a negative number,
zero or a positive number, like the classic ``cmp`` contract. The
comparator only looks at the sign.
"""

import re
from collections.abc import Callable

from story_sort.core.exceptions import ConfigError

NameComparator = Callable[[str, str], int]

_NUMERIC_SPLIT = re.compile(r"(\d+)")


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _cmp(left: object, right: object) -> int:
    return (left > right) - (left < right)  # type: ignore[operator]


def _locale_key(text: str) -> tuple[str, str, str]:
    # Letters first, then case (lower before upper), then code points.
    return (text.casefold(), text.swapcase(), text)


def _natural_key(text: str) -> tuple[tuple[int, object], ...]:
    key: list[tuple[int, object]] = []
    for part in _NUMERIC_SPLIT.split(text):
        if not part:
            continue
        if part.isdigit():
            key.append((0, int(part)))
        else:
            key.append((1, part.casefold()))
    return tuple(key)


def locale_compare(left: str, right: str) -> int:
    """Compare two names the way a user-facing listing orders them.

    Case is ignored first, so "apple" sorts next to "Apple" rather than
    after "Zebra". Names equal ignoring case put lower case first.

    Examples:
        >>> locale_compare("", "Story")
        -1
        >>> locale_compare("banana", "Apple")
        1
        >>> locale_compare("a", "A")
        -1

    """
    return _cmp(_locale_key(left), _locale_key(right))


def natural_compare(left: str, right: str) -> int:
    """Compare names treating runs of digits as numbers.

    Examples:
        >>> natural_compare("Story2", "Story10")
        -1
        >>> locale_compare("Story2", "Story10")
        1

    """
    result = _cmp(_natural_key(left), _natural_key(right))
    if result:
        return result
    return locale_compare(left, right)


def reverse_compare(compare: NameComparator) -> NameComparator:
    """Wrap a comparator so that it orders names in reverse."""

    def reversed_compare(left: str, right: str) -> int:
        return -_sign(compare(left, right))

    return reversed_compare


NAME_COMPARATORS: dict[str, NameComparator] = {
    "locale": locale_compare,
    "natural": natural_compare,
}


def get_name_comparator(name: str, reverse: bool = False) -> NameComparator:
    """Look up a built-in name comparator.

    Args:
        name: Comparator name ("locale" or "natural").
        reverse: Return the reversed comparator.

    Returns:
        The comparator function.

    Raises:
        ConfigError: If the name is not a known comparator.

    """
    try:
        compare = NAME_COMPARATORS[name]
    except KeyError:
        valid = ", ".join(sorted(NAME_COMPARATORS))
        raise ConfigError(f"Unknown name comparator: '{name}'. Valid options: {valid}") from None
    return reverse_compare(compare) if reverse else compare
