"""Command line entry point for story-sort.

Example:
    $ story-sort sort stories.yaml --config story-sort.yaml
    $ story-sort config verify
"""

import typer

from story_sort import __version__
from story_sort.commands.config import config_app
from story_sort.commands.sort import sort_command

app = typer.Typer(
    name="story-sort",
    help="Order component stories by group path and name",
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")
app.command(name="sort")(sort_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"story-sort {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Order component stories by group path and name."""


if __name__ == "__main__":
    app()
