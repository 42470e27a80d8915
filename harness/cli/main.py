"""CLI commands for resolving and inspecting harness configuration."""

import json
import sys
import uuid
from pathlib import Path

import click
import structlog

from harness import __version__
from harness.config.constants import COMPONENT_CLI
from harness.config.error_hints import format_validation_error
from harness.config.loader import ConfigLoader
from harness.config.resolved import ResolvedConfig
from harness.observability.logging import bind_run_context, configure_logging
from harness.planner.planner import RunPlanner
from harness.settings import get_settings


logger = structlog.get_logger()


def _setup(log_level: str | None, json_logs: bool | None) -> str:
    """Configure logging from options and settings, return the run ID."""
    settings = get_settings()
    run_id = str(uuid.uuid4())
    configure_logging(
        level=log_level or settings.log_level,
        output=sys.stderr,
        json_format=settings.log_json if json_logs is None else json_logs,
    )
    bind_run_context(run_id)
    return run_id


def _load(
    run_id: str,
    config_path: Path | None,
    environment: str | None = None,
    preset: str | None = None,
) -> ResolvedConfig:
    """Load configuration, exiting with status 1 on failure.

    Falls back to HARNESS_CONFIG_PATH, then to the all-defaults config.
    """
    path = config_path or get_settings().config_path
    loader = ConfigLoader(run_id=run_id)

    try:
        if path is None:
            return loader.load_raw({}, environment=environment, preset=preset)
        return loader.load(path, environment=environment, preset=preset)
    except Exception as e:
        logger.warning(
            "config_load_failed",
            component=COMPONENT_CLI,
            error=str(e),
            validation_errors=loader.validation_errors,
        )
        if not loader.validation_errors:
            raise

        click.echo("Configuration validation failed:", err=True)
        for error in loader.validation_errors:
            formatted = format_validation_error(
                location=error["loc"],
                message=error["msg"],
                error_type=error.get("type", "unknown"),
                include_hint=True,
            )
            click.echo(f"  - {formatted}", err=True)
        sys.exit(1)


config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a .yaml, .yml or .json harness config (default: HARNESS_CONFIG_PATH).",
)
log_level_option = click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: HARNESS_LOG_LEVEL or INFO).",
)
json_logs_option = click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Use JSON format for logs (default: HARNESS_LOG_JSON).",
)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Test harness configuration CLI."""


@cli.command()
@config_option
@click.option("--env", "environment", default=None, help="Override the environment.")
@click.option("--preset", default=None, help="Override the transformation preset.")
@click.option(
    "--json/--no-json",
    "as_json",
    default=False,
    help="Print the resolved config as JSON instead of a summary.",
)
@log_level_option
@json_logs_option
def resolve(
    config_path: Path | None,
    environment: str | None,
    preset: str | None,
    as_json: bool,
    log_level: str | None,
    json_logs: bool | None,
) -> None:
    """Resolve configuration and print the result."""
    run_id = _setup(log_level, json_logs)
    config = _load(run_id, config_path, environment=environment, preset=preset)

    if as_json:
        click.echo(json.dumps(config.to_raw(), indent=2, sort_keys=True))
        return

    click.echo(f"Preset: {config.preset or '(none)'}")
    click.echo(f"Environment: {config.environment}")
    click.echo("Test exclusions:")
    for pattern in config.test_exclusions:
        click.echo(f"  - {pattern}")
    click.echo("Coverage exclusions:")
    for pattern in config.coverage_exclusions:
        click.echo(f"  - {pattern}")
    click.echo(f"Checksum: {config.compute_checksum()}")


@cli.command()
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the harness config file to validate.",
)
@log_level_option
def validate(config_path: Path, log_level: str | None) -> None:
    """Validate a configuration file without running anything."""
    run_id = _setup(log_level, json_logs=False)
    config = _load(run_id, config_path)
    click.echo("Configuration is valid!")
    click.echo(f"  Environment: {config.environment}")
    click.echo(f"  Checksum: {config.compute_checksum()}")


@cli.command()
@config_option
@click.argument("paths", nargs=-1, required=True)
@log_level_option
def classify(
    config_path: Path | None, paths: tuple[str, ...], log_level: str | None
) -> None:
    """Show discovery and coverage decisions for PATHS."""
    run_id = _setup(log_level, json_logs=False)
    config = _load(run_id, config_path)
    planner = RunPlanner(config)

    for path in paths:
        decision = planner.classify(path)
        if decision.is_test_file:
            test_status = "test"
        elif decision.test_excluded_by is not None:
            test_status = f"test-excluded ({decision.test_excluded_by})"
        else:
            test_status = "source"

        if decision.instrumented:
            coverage_status = "instrumented"
        elif decision.coverage_excluded_by is not None:
            coverage_status = f"coverage-excluded ({decision.coverage_excluded_by})"
        else:
            coverage_status = "not-instrumented"

        click.echo(f"{decision.path}\t{test_status}\t{coverage_status}")


if __name__ == "__main__":
    cli()
