"""CLI commands for inspecting ambiguess settings."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from ambiguess.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    Settings,
    bootstrap_settings,
    resolve_config,
)
from ambiguess.errors import ConfigurationError, format_error_for_user


config_app = typer.Typer(help="Inspect ambiguess configuration")


@config_app.command("show")
def show_config(config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config")) -> None:
    """Display the effective configuration."""

    try:
        settings = bootstrap_settings(path=config_path)
    except ConfigurationError as e:
        typer.echo(format_error_for_user(e), err=True)
        raise typer.Exit(code=e.exit_code)
    typer.echo(_summarize_settings(settings))


@config_app.command("validate")
def validate_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
) -> None:
    """Validate the effective configuration, including every time zone."""

    try:
        settings = bootstrap_settings(path=config_path)
        config = resolve_config(settings)
    except ConfigurationError as e:
        typer.echo(f"❌ Configuration invalid: {e.message}", err=True)
        raise typer.Exit(code=e.exit_code)

    source = config_path if config_path.exists() else "defaults"
    typer.echo(f"✅ Configuration valid ({source})")
    typer.echo(f"   Time zones: {', '.join(zone.name for zone in config.zones)}")
    typer.echo(f"   Local zone: {settings.guessing.local_timezone or 'system'}")
    typer.echo(f"   DNS timeout: {config.dns_timeout}s")


def _summarize_settings(settings: Settings) -> str:
    return json.dumps(settings.model_dump(mode="json"), indent=2)
