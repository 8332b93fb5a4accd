"""CLI entry point for jettison-health.

Invoked as::

    jettison-health --config <config.json> <service>:<category> [...]

or, during development::

    python -m jettison_health.cli.main --config <config.json> ...

Exit status is ``0`` only when every requested health pool is fully
present.  Incomplete pools and fatal errors both exit ``1``; inspect the
JSON body to tell them apart.
"""
from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from jettison_health import __version__
from jettison_health.schema.errors import ArgumentError, ErrorSeverity, JettisonHealthError

if TYPE_CHECKING:
    from jettison_health.health.report import HealthReport

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: jettison-health --config <config.json> "
    "<service>:<category> [<service>:<category> ...]"
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_SEVERITY_LEVELS = {
    ErrorSeverity.CRITICAL: logging.CRITICAL,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.INFO: logging.INFO,
}


def _configure_logging(level: str) -> None:
    package_logger = logging.getLogger("jettison_health")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=error_console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


def _emit_json(document: dict[str, object]) -> None:
    # stdout stays machine-readable; no rich markup or wrapping.
    click.echo(json.dumps(document, indent=2))


def _fail(
    title: str,
    details: str,
    args: list[str] | None = None,
    level: int = logging.ERROR,
) -> NoReturn:
    from jettison_health.health.report import EXIT_FAILURE, error_document

    logger.log(level, "%s: %s", title, details)
    _emit_json(error_document(title, details, args))
    raise SystemExit(EXIT_FAILURE)


def _render_table(report: HealthReport) -> None:
    from jettison_health.health.report import HealthStatus
    from jettison_health.schema.health import HEALTH_FIELDS

    status_colour = {
        HealthStatus.HEALTHY: "green",
        HealthStatus.DEGRADED: "yellow",
        HealthStatus.UNHEALTHY: "red",
    }
    colour = status_colour[report.status]
    console.print(f"Overall status: [{colour}]{report.status.value.upper()}[/{colour}]")

    table = Table(header_style="bold cyan")
    table.add_column("Target")
    table.add_column("Exists")
    for health_field in HEALTH_FIELDS:
        table.add_column(health_field.value, justify="right")
    table.add_column("Missing")

    for key, record in report.records.items():
        exists = "[green]yes[/green]" if record.exists else "[red]no[/red]"
        values = [
            "-" if record.get(f) is None else str(record.get(f)) for f in HEALTH_FIELDS
        ]
        table.add_row(key, exists, *values, ", ".join(record.missing_keys))

    console.print(table)


@click.command(name="jettison-health")
@click.version_option(version=__version__, prog_name="jettison-health")
@click.option(
    "--config",
    "-c",
    "config_path",
    default=None,
    metavar="PATH",
    help="Path to the JSON (or YAML) configuration file.  Required.",
)
@click.option(
    "--format",
    "output_format",
    default="json",
    type=click.Choice(["json", "table"]),
    show_default=True,
    help="Output format.",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    show_default=True,
    help="Diagnostic log level (logs go to stderr).",
)
@click.argument("targets", nargs=-1)
def cli(
    config_path: str | None,
    output_format: str,
    log_level: str,
    targets: tuple[str, ...],
) -> None:
    """Report health-pool metrics for each SERVICE:CATEGORY target."""
    from jettison_health.convenience import query_health

    _configure_logging(log_level.upper())
    raw_args = list(targets)

    if not config_path:
        _fail("Configuration required", USAGE, raw_args)

    try:
        report = query_health(config_path, raw_args)
    except JettisonHealthError as exc:
        _fail(
            exc.title,
            str(exc),
            raw_args if isinstance(exc, ArgumentError) else None,
            level=_SEVERITY_LEVELS[exc.severity],
        )

    if output_format == "table":
        _render_table(report)
    else:
        _emit_json(report.to_dict())

    if not report.all_exist:
        logger.warning("Incomplete health pools: %s", ", ".join(report.missing_targets()))
    raise SystemExit(report.exit_code)


if __name__ == "__main__":
    cli()
