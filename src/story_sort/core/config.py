"""Sort configuration loaded from story-sort.yaml.

Example file:

    order:
      "**":
        default: null
      articles: null
      components:
        "*":
          default: null
    compare_names: natural
    reverse_names: false

Usage:
    from story_sort.core.config import load_sort_config

    config = load_sort_config(Path("story-sort.yaml"))
    ordered = sort_stories(stories, config.order, config.name_comparator())
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from story_sort.core.exceptions import ConfigError
from story_sort.ordering.matcher import RESERVED_KEYS
from story_sort.ordering.names import NameComparator, get_name_comparator

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "story-sort.yaml"


def _order_key(key: Any) -> str:
    # YAML turns bare `~` into None and numbers into ints.
    return "" if key is None else str(key)


def find_order_issues(node: Any, path: str = "") -> list[str]:
    """Describe problems in an order tree that make entries unreachable.

    Keys are looked up lower-cased, so keys with upper-case letters never
    match. Non-mapping values other than None are treated as terminal.

    Args:
        node: Order tree (or sub-tree) to inspect.
        path: Slash-joined location of the node, for messages.

    Returns:
        Human-readable issue descriptions, empty if the tree is clean.

    """
    issues: list[str] = []
    if not isinstance(node, Mapping):
        return issues

    seen: set[str] = set()
    for raw_key, value in node.items():
        key = _order_key(raw_key)
        location = f"{path}/{key}" if path else key or '""'
        if key not in RESERVED_KEYS and key != key.lower():
            issues.append(f"Key '{location}' is not lower-case")
        if key.lower() in seen:
            issues.append(f"Key '{location}' duplicates a sibling when lower-cased")
        seen.add(key.lower())
        if value is not None and not isinstance(value, Mapping):
            issues.append(
                f"Value of '{location}' is a {type(value).__name__}; "
                "use a mapping or null"
            )
        issues.extend(find_order_issues(value, location))
    return issues


def normalize_order(node: Any) -> Any:
    """Return a copy of an order tree with string, lower-cased keys.

    The first of several keys that collide after lower-casing wins its
    position and its value. Non-mapping values become None.
    """
    if not isinstance(node, Mapping):
        return None
    normalized: dict[str, Any] = {}
    for raw_key, value in node.items():
        key = _order_key(raw_key).lower()
        if key in normalized:
            continue
        normalized[key] = normalize_order(value)
    return normalized


class SortConfig(BaseModel):
    """Story sort configuration.

    Attributes:
        order: Order tree; None sorts alphabetically throughout.
        compare_names: Built-in name comparator for alphabetical fallback.
        reverse_names: Reverse the name comparator.

    Example:
        >>> config = SortConfig(order={"Articles": None})
        >>> config.order
        {'articles': None}

    """

    model_config = ConfigDict(frozen=True)

    order: dict[str, Any] | None = Field(
        default=None,
        description="Nested order tree, keys matched case-insensitively",
    )
    compare_names: Literal["locale", "natural"] = Field(
        default="locale",
        description="Name comparator used where the order tree is silent",
    )
    reverse_names: bool = Field(
        default=False,
        description="Reverse the name comparator",
    )

    @field_validator("order", mode="before")
    @classmethod
    def normalize_order_tree(cls, v: Any) -> dict[str, Any] | None:
        """Lower-case keys so every listed entry can match."""
        if v is None:
            return None
        if not isinstance(v, Mapping):
            raise ValueError(f"order must be a mapping, got {type(v).__name__}")
        return normalize_order(v)

    @field_validator("reverse_names", mode="before")
    @classmethod
    def coerce_none_to_false(cls, v: Any) -> Any:
        """YAML parses an empty value as None."""
        return False if v is None else v

    def name_comparator(self) -> NameComparator:
        """Return the configured name comparator."""
        return get_name_comparator(self.compare_names, reverse=self.reverse_names)


def parse_sort_config(data: Any, path: Path | None = None) -> SortConfig:
    """Validate raw configuration data, logging a warning per order tree issue.

    Args:
        data: Parsed YAML content. None yields the default config.
        path: Source file, for error messages.

    Returns:
        Validated SortConfig.

    Raises:
        ConfigError: If the data is not a mapping or fails validation.

    """
    source = str(path) if path else "config"
    if data is None:
        return SortConfig()
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"{source} must contain a mapping, got {type(data).__name__}", path=path
        )
    try:
        config = SortConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {source}: {e}", path=path) from e

    for issue in find_order_issues(data.get("order")):
        logger.warning("Order tree: %s", issue)
    return config


def load_sort_config(path: Path) -> SortConfig:
    """Load and validate a story-sort YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Validated SortConfig.

    Raises:
        ConfigError: If the file is missing, not valid YAML, or invalid.

    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}", path=path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=path) from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}", path=path) from e

    config = parse_sort_config(data, path)
    logger.debug("Loaded sort config from %s", path)
    return config


def find_config(directory: Path) -> Path | None:
    """Return the story-sort.yaml in a directory, if present."""
    candidate = directory / CONFIG_FILENAME
    return candidate if candidate.is_file() else None
