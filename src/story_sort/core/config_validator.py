"""Checks behind `story-sort config verify`.

Each check yields a (status, message) pair. Validation is silent: issues
are returned, never logged, so the report is the only place they appear.
"""

from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError
from rich.markup import escape

from story_sort.core.config import SortConfig, find_order_issues

# Check result statuses
OK = "OK"
WARN = "WARN"
ERR = "ERR"

_STATUS_STYLE = {OK: "green", WARN: "yellow", ERR: "red"}


def validate_config_file(config_path: Path) -> list[tuple[str, str]]:
    """Run all checks against a config file.

    Args:
        config_path: Path to the YAML config.

    Returns:
        List of (status, message) tuples in check order.

    """
    results: list[tuple[str, str]] = []

    if not config_path.exists():
        results.append((ERR, f"Config file not found: {config_path}"))
        return results
    if not config_path.is_file():
        results.append((ERR, f"Not a file: {config_path}"))
        return results

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        results.append((ERR, f"YAML syntax: {e}"))
        return results
    except OSError as e:
        results.append((ERR, f"Cannot read file: {e}"))
        return results
    results.append((OK, "YAML syntax"))

    if data is None:
        results.append((WARN, "Config is empty, stories will sort alphabetically"))
        return results
    if not isinstance(data, Mapping):
        results.append((ERR, f"Top level must be a mapping, got {type(data).__name__}"))
        return results

    unknown = sorted(str(k) for k in data if k not in SortConfig.model_fields)
    for key in unknown:
        results.append((WARN, f"Unknown setting '{key}' is ignored"))

    try:
        SortConfig.model_validate(dict(data))
    except ValidationError as e:
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "config"
            results.append((ERR, f"{location}: {error['msg']}"))
        return results
    results.append((OK, "Settings"))

    order = data.get("order")
    if order is None:
        results.append((WARN, "No order tree, stories will sort alphabetically"))
        return results

    issues = find_order_issues(order)
    results.extend((WARN, f"Order tree: {issue}") for issue in issues)
    if not issues:
        results.append((OK, "Order tree"))

    return results


def format_validation_report(
    results: list[tuple[str, str]], config_path: Path
) -> tuple[str, bool]:
    """Render check results as rich markup.

    Returns:
        Tuple of (report text, whether any check failed).

    """
    lines = [f"[bold]Verifying {escape(str(config_path))}[/bold]"]
    for status, message in results:
        style = _STATUS_STYLE[status]
        lines.append(f"[{style}]\\[{status}][/{style}] {escape(message)}")
    has_errors = any(status == ERR for status, _ in results)
    return "\n".join(lines), has_errors
