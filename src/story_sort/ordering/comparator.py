"""Story comparison against an order tree.

Both story paths are walked level by level through the order tree. Levels
where the two keys are equal only move the tree position forward. The first
level where the keys differ decides the result:

1. A more specific match tier sorts first (explicit entry, then ``*``,
   then ``**``, then unlisted).
2. Within a ranked tier (explicit or ``**``), the key listed earlier sorts
   first.
3. Otherwise the name comparator decides.

When one path is longer and all shared levels are equal, the walk goes on
with each remaining key compared against the shorter path's name.

Usage:
    from story_sort import sort_stories

    order = {"articles": None, "components": {"*": {"default": None}}}
    ordered = sort_stories(stories, order)
"""

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any

from story_sort.ordering.keys import PathKey, decompose
from story_sort.ordering.matcher import MatchContext, OrderNode, resolve
from story_sort.ordering.names import NameComparator, _sign, locale_compare
from story_sort.stories import story_fields

logger = logging.getLogger(__name__)

__all__ = [
    "compare_keys",
    "compare_paths",
    "compare_stories",
    "make_story_sort",
    "story_sort_key",
    "sort_stories",
]


def compare_keys(
    context: MatchContext,
    key_a: PathKey,
    key_b: PathKey,
    compare_names: NameComparator,
) -> int:
    """Order two differing keys found at the same level.

    Args:
        context: Tree position shared by both keys.
        key_a: Key of the first story.
        key_b: Key of the second story.
        compare_names: Fallback comparator for the display texts.

    Returns:
        -1 if key_a sorts first, 1 if key_b does, 0 only if the name
        comparator ties them.

    """
    match_a = resolve(context, key_a)
    match_b = resolve(context, key_b)

    if match_a.tier != match_b.tier:
        return -1 if match_a.tier > match_b.tier else 1

    if match_a.tier.ranked:
        # Both were found in the same node, so their ranks differ.
        return -1 if match_a.rank < match_b.rank else 1

    return _sign(compare_names(key_a.display, key_b.display))


def compare_paths(
    order: OrderNode | None,
    keys_a: tuple[PathKey, ...],
    keys_b: tuple[PathKey, ...],
    compare_names: NameComparator = locale_compare,
) -> int:
    """Compare two decomposed story paths.

    Args:
        order: Root of the order tree, or None for alphabetical ordering.
        keys_a: Path keys of the first story.
        keys_b: Path keys of the second story.
        compare_names: Fallback comparator for display texts.

    Returns:
        -1, 0 or 1.

    """
    context = MatchContext(order)
    shared = min(len(keys_a), len(keys_b))
    for key_a, key_b in zip(keys_a[:shared], keys_b[:shared]):
        if key_a.lookup != key_b.lookup:
            return compare_keys(context, key_a, key_b, compare_names)
        context = resolve(context, key_a).next_context
    if len(keys_a) == len(keys_b):
        return 0

    # Leftover levels of the longer path are compared against the name of
    # the shorter one, keeping the argument order.
    name_a, name_b = keys_a[shared - 1], keys_b[shared - 1]
    for index in range(shared, max(len(keys_a), len(keys_b))):
        key_a = keys_a[index] if index < len(keys_a) else name_a
        key_b = keys_b[index] if index < len(keys_b) else name_b
        if key_a.lookup != key_b.lookup:
            return compare_keys(context, key_a, key_b, compare_names)
        context = resolve(context, key_a).next_context
    return 0


def compare_stories(
    order: OrderNode | None,
    story_a: Any,
    story_b: Any,
    compare_names: NameComparator | None = None,
) -> int:
    """Compare two stories for display order.

    Args:
        order: Root of the order tree. None, or any non-mapping value, sorts
            purely by the name comparator.
        story_a: First story (Story, mapping, or ``(id, metadata)`` pair).
        story_b: Second story.
        compare_names: Comparator for alphabetical fallback. Defaults to
            ``locale_compare``.

    Returns:
        -1 if story_a comes first, 1 if story_b does, 0 if they tie.

    Examples:
        >>> compare_stories(None, {"group": "", "name": ""}, {"group": "", "name": "Story"})
        -1
        >>> order = {"": {"story": {}}}
        >>> compare_stories(order, {"group": "", "name": ""}, {"group": "", "name": "Story"})
        1

    """
    keys_a = decompose(*story_fields(story_a))
    keys_b = decompose(*story_fields(story_b))
    return compare_paths(order, keys_a, keys_b, compare_names or locale_compare)


def make_story_sort(
    order: OrderNode | None = None,
    compare_names: NameComparator | None = None,
) -> Callable[[Any, Any], int]:
    """Bind an order tree into a two-argument story comparator.

    The result has the signature of a story browser's sort hook,
    ``story_sort(a, b) -> int``.
    """

    def story_sort(story_a: Any, story_b: Any) -> int:
        return compare_stories(order, story_a, story_b, compare_names)

    return story_sort


def story_sort_key(
    order: OrderNode | None = None,
    compare_names: NameComparator | None = None,
) -> Callable[[Any], Any]:
    """Build a ``key`` function for ``sorted`` and ``list.sort``.

    Examples:
        >>> stories = [{"group": "B", "name": "x"}, {"group": "A", "name": "y"}]
        >>> [s["group"] for s in sorted(stories, key=story_sort_key())]
        ['A', 'B']

    """
    return functools.cmp_to_key(make_story_sort(order, compare_names))


def sort_stories(
    stories: Iterable[Any],
    order: OrderNode | None = None,
    compare_names: NameComparator | None = None,
) -> list[Any]:
    """Return the stories in display order.

    The input is not modified and the stories are returned as given (not
    converted to Story). Sorting is stable: stories that compare equal
    keep their input order.

    Args:
        stories: Story-like values.
        order: Root of the order tree.
        compare_names: Comparator for alphabetical fallback.

    Returns:
        New list with the same stories, sorted.

    """
    ordered = sorted(stories, key=story_sort_key(order, compare_names))
    logger.debug("Sorted %d stories", len(ordered))
    return ordered
