"""story-sort: hierarchical display ordering for component stories.

Orders stories by their group path and name according to a nested order
tree, falling back to alphabetical order wherever the tree is silent.
"""

from story_sort.core.exceptions import ConfigError, StoryFormatError, StorySortError
from story_sort.ordering import (
    compare_stories,
    make_story_sort,
    sort_stories,
    story_sort_key,
)
from story_sort.stories import Story, coerce_story, load_stories

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Story",
    "StoryFormatError",
    "StorySortError",
    "coerce_story",
    "compare_stories",
    "load_stories",
    "make_story_sort",
    "sort_stories",
    "story_sort_key",
]
