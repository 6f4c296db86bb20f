"""Config command group for story-sort.

Provides configuration verification:
- `story-sort config verify`: Validate a story-sort.yaml file

Example:
    $ story-sort config verify
    $ story-sort config verify ~/my-project/story-sort.yaml
"""

import logging
from pathlib import Path

import typer

from story_sort.cli_utils import EXIT_CONFIG_ERROR, EXIT_SUCCESS, _setup_logging, console
from story_sort.core.config import CONFIG_FILENAME
from story_sort.core.config_validator import (
    ERR,
    WARN,
    format_validation_report,
    validate_config_file,
)

logger = logging.getLogger(__name__)

config_app = typer.Typer(
    name="config",
    help="Configuration management commands",
    no_args_is_help=True,
)


@config_app.command(name="verify")
def verify_command(
    config: Path = typer.Argument(
        None,
        help=f"Path to config file (default: ./{CONFIG_FILENAME})",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Verify configuration file for errors and warnings.

    Checks YAML syntax, settings, and order tree keys.
    Shows [OK], [WARN], or [ERR] status for each check.

    Exits with code 0 if valid (warnings allowed), 2 if errors found.
    """
    _setup_logging(verbose=verbose)

    config_path = (config if config is not None else Path(CONFIG_FILENAME)).resolve()
    results = validate_config_file(config_path)
    logger.debug("Config verification produced %d results", len(results))

    report, has_errors = format_validation_report(results, config_path)
    console.print(report)

    errors = sum(1 for status, _ in results if status == ERR)
    warnings = sum(1 for status, _ in results if status == WARN)
    if has_errors:
        console.print(f"[red]{errors} error(s)[/red], {warnings} warning(s)")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    console.print(f"[green]Config is valid[/green], {warnings} warning(s)")
    raise typer.Exit(code=EXIT_SUCCESS)
