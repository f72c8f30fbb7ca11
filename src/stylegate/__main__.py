from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import click
import rich.console
import rich.table
from loguru import logger

from stylegate.config import ConfigError, load_config
from stylegate.evaluator import evaluate
from stylegate.reporter import JsonReporter, Reporter, TerminalReporter, emit
from stylegate.rules import UnknownRuleError, default_registry
from stylegate.scanner import UnreadablePathError, check_root, scan
from stylegate.utils import plural


class FatalError(click.ClickException):
    """Error that aborts a run before any file is checked."""

    exit_code = 2


@click.group
@click.option("-v", "--verbose", is_flag=True, default=False, help="Print debug output")
@click.option(
    "-q", "--quiet", is_flag=True, default=False, help="Print only warnings and errors"
)
def cli(verbose: bool, quiet: bool) -> None:
    """Style-rule conformance checker for JavaScript and React projects."""
    if verbose and quiet:
        raise click.BadOptionUsage(
            "verbose", "--verbose and --quiet are mutually exclusive"
        )
    # Set up logging
    logger.remove()
    desired_level = "DEBUG" if verbose else "WARNING" if quiet else "INFO"
    logger.add(sys.stderr, level=desired_level)


@cli.command
@click.argument("root", type=click.Path(path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON configuration file (default: .stylegate.json or the \"stylegate\" key in package.json)",
)
@click.option(
    "--ignore",
    multiple=True,
    help="Additional glob pattern of files or directories to skip. Can be given multiple times.",
)
@click.option(
    "--disable",
    multiple=True,
    help="Identifier of a rule not to run. Can be given multiple times.",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
def check(
    root: Path,
    config_path: Path | None,
    ignore: Sequence[str],
    disable: Sequence[str],
    output_format: str,
) -> None:
    """Check the project residing at ROOT against the style rules.

    Exits with status 0 when no violations are found, 1 when there are
    violations, and 2 when the project or configuration cannot be used.
    """
    registry = default_registry()
    try:
        check_root(root)
        config = load_config(root, config_path).extend(ignore=ignore, disable=disable)
        rules = registry.select(config.disable)
        files = scan(root, config)
    except (ConfigError, UnknownRuleError, UnreadablePathError) as exc:
        raise FatalError(str(exc)) from exc

    result = evaluate(files, rules)
    logger.info(
        f"Checked {plural(result.files_checked, 'file')} against {plural(len(rules), 'rule')}"
    )
    if result.errors:
        logger.warning(
            f"{plural(len(result.errors), 'rule check')} failed, see the report for details"
        )

    reporter: Reporter = JsonReporter() if output_format == "json" else TerminalReporter()
    passed = emit(result.violations, reporter)
    sys.exit(0 if passed else 1)


@cli.command
def rules() -> None:
    """List all available rules."""
    table = rich.table.Table("Rule", "Applies to", "Description")
    for rule in default_registry().all():
        categories = (
            "all files"
            if rule.categories is None
            else ", ".join(sorted(cat.value for cat in rule.categories))
        )
        table.add_row(rule.id, categories, rule.description)
    rich.console.Console(width=999).print(table)


if __name__ == "__main__":
    cli()
