"""The ``guess`` command.

Examples:
    ambiguess guess 1443346122
    ambiguess guess "2015-09-26 11:29:43 PDT" --verbose
    ambiguess guess 8TiB --json
    ambiguess guess 0 --unlikely --no-sort
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

import typer
from dateutil import parser as dateutil_parser
from rich.console import Console
from rich.text import Text

from ambiguess.cli.render import render_guess
from ambiguess.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    bootstrap_settings,
    resolve_config,
    split_zone_list,
)
from ambiguess.errors import (
    AmbiguessError,
    ClassificationError,
    ConfigurationError,
    InternalConsistencyError,
    format_error_for_user,
)
from ambiguess.guessing import NullResolver, SocketResolver, guess, rank

logger = logging.getLogger(__name__)


def _configure_logging(trace: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if trace else logging.WARNING,
        format="TRACE: %(asctime)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _parse_now(value: Optional[str]) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    try:
        current = dateutil_parser.isoparse(value)
    except ValueError as e:
        raise typer.BadParameter(f"not an ISO 8601 instant: {value}", param_hint="--now") from e
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    return current


def _fail(error: AmbiguessError, token: str, output_json: bool) -> NoReturn:
    if output_json:
        typer.echo(json.dumps({"token": token, "error": error.to_dict()}, indent=2))
    elif isinstance(error, ClassificationError):
        typer.echo(error.user_message)
    else:
        typer.echo(format_error_for_user(error), err=True)
    raise typer.Exit(code=error.exit_code)


def _overrides(
    *,
    unlikely: bool,
    sort: Optional[bool],
    verbose: bool,
    color: Optional[bool],
    timezones: Optional[str],
    local_timezone: Optional[str],
    no_dns: bool,
) -> Dict[str, Any]:
    guessing: Dict[str, Any] = {}
    display: Dict[str, Any] = {}
    if timezones is not None:
        guessing["timezones"] = split_zone_list(timezones)
    if local_timezone:
        guessing["local_timezone"] = local_timezone
    if no_dns:
        guessing["resolve_dns"] = False
    if unlikely:
        display["show_unlikely"] = True
    if verbose:
        display["verbose"] = True
    if sort is not None:
        display["sort"] = sort
    if color is not None:
        display["color"] = color
    return {"guessing": guessing, "display": display}


def guess_command(
    token: str = typer.Argument(..., help="String to guess"),
    unlikely: bool = typer.Option(False, "--unlikely", help="Also show unlikely matches"),
    sort: Optional[bool] = typer.Option(None, "--sort/--no-sort", help="Sort guesses by likeliness"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print goodness and source of each guess"),
    trace: bool = typer.Option(False, "--trace", help="Trace program execution on stderr"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Style terminal output"),
    timezones: Optional[str] = typer.Option(
        None, "--timezones", help="Comma-separated zones to convert to and from"
    ),
    local_timezone: Optional[str] = typer.Option(None, "--local-timezone", help="Zone for naive dates"),
    now: Optional[str] = typer.Option(None, "--now", help="ISO 8601 instant to treat as now"),
    no_dns: bool = typer.Option(False, "--no-dns", help="Skip host name lookups for IP addresses"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
) -> None:
    """Guess what TOKEN might be: byte count, timestamp, date or IP address."""

    _configure_logging(trace)
    token = token.strip()
    if not token:
        typer.echo("Usage: ambiguess guess <string-to-guess>", err=True)
        raise typer.Exit(code=1)

    current = _parse_now(now)
    try:
        settings = bootstrap_settings(
            path=config_path,
            overrides=_overrides(
                unlikely=unlikely,
                sort=sort,
                verbose=verbose,
                color=color,
                timezones=timezones,
                local_timezone=local_timezone,
                no_dns=no_dns,
            ),
        )
        config = resolve_config(settings)
    except ConfigurationError as e:
        _fail(e, token, output_json)

    resolver = SocketResolver(config.dns_timeout) if settings.guessing.resolve_dns else NullResolver()
    try:
        guesses = guess(token, config, current, resolver)
    except ClassificationError as e:
        logger.debug(e.message)
        _fail(e, token, output_json)
    except InternalConsistencyError as e:
        _fail(e, token, output_json)

    display = settings.display
    ranking = rank(guesses, sort=display.sort, show_unlikely=display.show_unlikely)

    if output_json:
        typer.echo(json.dumps({
            "token": token,
            "note": ranking.note,
            "guesses": [g.to_dict() for g in ranking.guesses],
        }, indent=2))
        return

    console = Console(color_system="auto" if display.color else None, highlight=False, soft_wrap=True)
    if ranking.note:
        console.print(Text(ranking.note.capitalize() + ":"))
    for g in ranking.guesses:
        console.print(render_guess(g, verbose=display.verbose), end="")
