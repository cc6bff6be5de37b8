"""Teamwork Search CLI entry point.

Usage:
    teamwork-search                          # Launch with configured settings
    teamwork-search init                     # Initialize configuration
    teamwork-search run                      # Run with explicit settings
    teamwork-search run --enter-only         # Search only on Enter
    teamwork-search config --show            # Print the settings file
"""

from __future__ import annotations

import logging

import click
import yaml

from .config import (
    ConfigError,
    default_settings,
    load_settings,
    save_settings,
    search_config_from_settings,
    settings_path,
)

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.option("--log-file", default=None, help="Write logs to this file")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level (only used with --log-file)",
)
@click.pass_context
@click.version_option(version="0.1.0")
def main(ctx: click.Context, log_file: str | None, log_level: str) -> None:
    """Teamwork Search - autocomplete search input for the terminal.

    Run without arguments to start the showcase with configured settings.
    Use 'init' to configure, 'run' for explicit options.
    """
    # A full-screen TUI owns the terminal, so logs only go to a file
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if ctx.invoked_subcommand is None:
        _run_with_options(None, None, None)


# =============================================================================
# Init Command
# =============================================================================


@main.command("init")
@click.option("--debounce-time", type=float, default=None, help="Seconds to wait after typing")
@click.option("--max-suggestions", type=int, default=None, help="Suggestions to display")
@click.option("--enter-only", is_flag=True, default=None, help="Search only on Enter")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing configuration")
@click.option("--yes", "-y", is_flag=True, help="Accept defaults without prompting")
def init_config(
    debounce_time: float | None,
    max_suggestions: int | None,
    enter_only: bool | None,
    force: bool,
    yes: bool,
) -> None:
    """Initialize the Teamwork Search configuration.

    Examples:

        # Interactive setup
        teamwork-search init

        # Non-interactive with defaults
        teamwork-search init --yes

        # Slower debounce, fewer suggestions
        teamwork-search init --debounce-time 0.5 --max-suggestions 3 --yes
    """
    path = settings_path()

    if path.exists() and not force:
        click.echo(f"Configuration already exists at {path}")
        click.echo("Use --force to overwrite existing configuration.")
        if not yes and not click.confirm("Continue anyway?"):
            return

    settings = default_settings()
    search = settings["search"]

    if debounce_time is None and not yes:
        debounce_time = click.prompt(
            "Debounce time (seconds)", default=search["debounce_time"], type=float
        )
    if max_suggestions is None and not yes:
        max_suggestions = click.prompt(
            "Maximum suggestions", default=search["max_suggestions"], type=int
        )

    if debounce_time is not None:
        search["debounce_time"] = debounce_time
    if max_suggestions is not None:
        search["max_suggestions"] = max_suggestions
    if enter_only:
        search["search_on_enter_only"] = True

    try:
        search_config_from_settings(settings)
    except ConfigError as e:
        raise click.BadParameter(str(e)) from e

    save_settings(settings, path)

    click.echo(f"\n✓ Configuration saved to {path}")
    click.echo(f"  Debounce time:    {search['debounce_time']}s")
    click.echo(f"  Max suggestions:  {search['max_suggestions']}")
    click.echo(f"  Enter only:       {search['search_on_enter_only']}")

    click.echo("\nTo start the showcase:")
    click.echo("  teamwork-search           # Use configured settings")
    click.echo("  teamwork-search run       # Same as above")


# =============================================================================
# Run Command
# =============================================================================


@main.command("run")
@click.option("--debounce-time", type=float, default=None, help="Seconds to wait after typing")
@click.option("--max-suggestions", type=int, default=None, help="Suggestions to display")
@click.option(
    "--enter-only/--live",
    default=None,
    help="Search only on Enter, or while typing (overrides config)",
)
def run_command(
    debounce_time: float | None,
    max_suggestions: int | None,
    enter_only: bool | None,
) -> None:
    """Run the Teamwork Search showcase.

    Command-line options override the settings file.

    Examples:

        teamwork-search run --debounce-time 0.5
        teamwork-search run --enter-only
    """
    _run_with_options(debounce_time, max_suggestions, enter_only)


# =============================================================================
# Config Command
# =============================================================================


@main.command("config")
@click.option("--show", is_flag=True, help="Show current configuration")
def config_command(show: bool) -> None:
    """View or manage configuration."""
    path = settings_path()
    try:
        settings = load_settings(path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if settings is None:
        click.echo("No configuration found. Run 'teamwork-search init' to create one.")
        return

    click.echo(f"Configuration file: {path}\n")
    if show:
        click.echo(yaml.dump(settings, default_flow_style=False, sort_keys=False))


# =============================================================================
# Helper Functions
# =============================================================================


def _run_with_options(
    debounce_time: float | None,
    max_suggestions: int | None,
    enter_only: bool | None,
) -> None:
    """Build the search config from settings plus overrides and run."""
    from .app import run

    try:
        config = search_config_from_settings(
            load_settings(),
            debounce_time=debounce_time,
            max_suggestions=max_suggestions,
            search_on_enter_only=enter_only,
        )
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logger.info(f"Starting showcase with {config}")
    run(config)


if __name__ == "__main__":
    main()
