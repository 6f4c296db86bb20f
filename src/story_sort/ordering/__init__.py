"""Story ordering: path decomposition, order tree matching and comparison.

Usage:
    from story_sort.ordering import compare_stories, sort_stories

    order = {
        "**": {"default": None},
        "articles": None,
        "components": {"navigation": None},
    }
    compare_stories(order, ("a", {"kind": "Articles", "name": "Intro"}),
                    ("b", {"kind": "Components/Navigation", "name": "Default"}))
"""

from story_sort.ordering.comparator import (
    compare_keys,
    compare_paths,
    compare_stories,
    make_story_sort,
    sort_stories,
    story_sort_key,
)
from story_sort.ordering.keys import PathKey, decompose
from story_sort.ordering.matcher import (
    DEEP_WILDCARD,
    SINGLE_WILDCARD,
    MatchContext,
    MatchTier,
    Resolution,
    resolve,
)
from story_sort.ordering.names import (
    get_name_comparator,
    locale_compare,
    natural_compare,
    reverse_compare,
)

__all__ = [
    "DEEP_WILDCARD",
    "SINGLE_WILDCARD",
    "MatchContext",
    "MatchTier",
    "PathKey",
    "Resolution",
    "compare_keys",
    "compare_paths",
    "compare_stories",
    "decompose",
    "get_name_comparator",
    "locale_compare",
    "make_story_sort",
    "natural_compare",
    "resolve",
    "reverse_compare",
    "sort_stories",
    "story_sort_key",
]
