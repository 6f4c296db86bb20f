"""Story records and story list loading.

Stories reach the comparator in several shapes:

- ``Story`` instances
- mappings with ``group`` (or ``kind`` / ``title``) and ``name`` fields
- ``(id, metadata)`` pairs, where metadata is such a mapping; this is the
  shape a story browser passes to its sort hook

All of them are normalised to ``Story`` before comparison.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, NamedTuple

import yaml

from story_sort.core.exceptions import StoryFormatError

logger = logging.getLogger(__name__)

__all__ = [
    "Story",
    "coerce_story",
    "story_fields",
    "load_stories",
]

# Field names accepted for the group path, in lookup order.
GROUP_FIELDS: tuple[str, ...] = ("group", "kind", "title")


class Story(NamedTuple):
    """A displayable example with a group path and a leaf name.

    Attributes:
        id: Opaque identifier, passed through untouched.
        group: Slash-delimited group path, "" when ungrouped.
        name: Leaf display name.

    """

    id: Any
    group: str
    name: str

    @property
    def path(self) -> str:
        """Full display path, e.g. "Components/Header/Default"."""
        return f"{self.group}/{self.name}" if self.group else self.name


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _group_of(metadata: Mapping[str, Any]) -> str:
    for field in GROUP_FIELDS:
        if metadata.get(field) is not None:
            return _text(metadata[field])
    return ""


def story_fields(value: Any) -> tuple[str, str]:
    """Extract ``(group, name)`` from any story-like value.

    Never raises: values without a recognisable shape yield empty strings,
    so that a sort over mixed input still completes.

    Args:
        value: Story, mapping, or ``(id, metadata)`` pair.

    Returns:
        Tuple of group path and name.

    """
    if isinstance(value, Story):
        return value.group, value.name
    if isinstance(value, Mapping):
        return _group_of(value), _text(value.get("name"))
    if (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and len(value) == 2
        and isinstance(value[1], Mapping)
    ):
        return story_fields(value[1])
    return "", ""


def coerce_story(value: Any, default_id: Any = None) -> Story:
    """Convert a story-like value into a ``Story``.

    Args:
        value: Story, mapping, or ``(id, metadata)`` pair.
        default_id: Identifier to use when the value carries none.

    Returns:
        Normalised Story.

    Raises:
        StoryFormatError: If the value has none of the accepted shapes.

    """
    if isinstance(value, Story):
        return value
    if isinstance(value, Mapping):
        group, name = story_fields(value)
        story_id = value.get("id")
        return Story(story_id if story_id is not None else default_id, group, name)
    if (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and len(value) == 2
        and isinstance(value[1], Mapping)
    ):
        group, name = story_fields(value[1])
        story_id = value[0] if value[0] is not None else default_id
        return Story(story_id, group, name)
    raise StoryFormatError(f"Not a story: {value!r}")


def load_stories(path: Path) -> list[Story]:
    """Load a list of stories from a YAML or JSON file.

    The file holds either a list of stories or a mapping with a ``stories``
    list. Stories without an ``id`` get their position in the file.

    Args:
        path: File to read.

    Returns:
        Stories in file order.

    Raises:
        StoryFormatError: If the file is missing, unparsable, or not a list
            of stories.

    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise StoryFormatError(f"Stories file not found: {path}", path=path) from e
    except yaml.YAMLError as e:
        raise StoryFormatError(f"Invalid YAML in {path}: {e}", path=path) from e
    except OSError as e:
        raise StoryFormatError(f"Failed to read {path}: {e}", path=path) from e

    if isinstance(data, Mapping):
        data = data.get("stories")
    if data is None:
        logger.warning("No stories found in %s", path)
        return []
    if not isinstance(data, list):
        raise StoryFormatError(
            f"Expected a list of stories in {path}, got {type(data).__name__}", path=path
        )

    stories: list[Story] = []
    for index, item in enumerate(data):
        try:
            stories.append(coerce_story(item, default_id=index))
        except StoryFormatError as e:
            raise StoryFormatError(f"Story #{index} in {path}: {e}", path=path) from e

    logger.debug("Loaded %d stories from %s", len(stories), path)
    return stories
