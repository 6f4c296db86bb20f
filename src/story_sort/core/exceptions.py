"""Exception hierarchy for story-sort.

The comparator itself never raises: malformed orders and stories degrade to
alphabetical ordering. These exceptions are raised by the loaders and
surfaced by the CLI.
"""

from pathlib import Path

__all__ = [
    "StorySortError",
    "ConfigError",
    "StoryFormatError",
]


class StorySortError(Exception):
    """Base exception for all story-sort errors.

    Attributes:
        path: File the error relates to, if any.

    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description.
            path: Optional file path the error relates to.

        """
        super().__init__(message)
        self.path = path


class ConfigError(StorySortError):
    """Sort configuration is missing, unreadable or invalid."""


class StoryFormatError(StorySortError):
    """Story input cannot be interpreted as a story or list of stories."""
