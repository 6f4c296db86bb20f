"""Sort command for story-sort.

Reads a list of stories from a YAML or JSON file and prints them in display
order, using the order tree from a story-sort.yaml config.

Example:
    $ story-sort sort stories.yaml
    $ story-sort sort stories.json --config ./story-sort.yaml --json
"""

import json
import logging
from pathlib import Path

import typer
from rich.table import Table

from story_sort.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    _error,
    _info,
    _setup_logging,
    console,
)
from story_sort.core.config import SortConfig, find_config, load_sort_config
from story_sort.core.exceptions import ConfigError, StoryFormatError
from story_sort.ordering import sort_stories
from story_sort.stories import Story, load_stories

logger = logging.getLogger(__name__)


def _resolve_config(config: Path | None, stories_file: Path) -> SortConfig:
    """Load the explicit config, or story-sort.yaml next to the stories file.

    Raises:
        typer.Exit: If the config cannot be loaded.

    """
    config_path = config if config is not None else find_config(stories_file.parent)
    if config_path is None:
        logger.debug("No config found, sorting alphabetically")
        return SortConfig()

    try:
        return load_sort_config(config_path)
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None


def _print_table(stories: list[Story]) -> None:
    table = Table(title="Stories")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Group", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("ID", style="dim")
    for position, story in enumerate(stories, start=1):
        table.add_row(str(position), story.group or "-", story.name or "-", str(story.id))
    console.print(table)


def sort_command(
    stories_file: Path = typer.Argument(
        ...,
        help="YAML or JSON file with a list of stories",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: story-sort.yaml next to the stories file)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print one JSON object per story (JSON lines) instead of a table",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Print stories in display order.

    Exits with code 0 on success, 1 if the stories cannot be read,
    2 on configuration errors.
    """
    _setup_logging(verbose=verbose, quiet=as_json and not verbose)

    sort_config = _resolve_config(config, stories_file)

    try:
        stories = load_stories(stories_file)
    except StoryFormatError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    ordered = sort_stories(stories, sort_config.order, sort_config.name_comparator())

    if as_json:
        for story in ordered:
            record = {"id": story.id, "group": story.group, "name": story.name}
            typer.echo(json.dumps(record, default=str))
        return

    if not ordered:
        _info("No stories to sort")
        return
    _print_table(ordered)
