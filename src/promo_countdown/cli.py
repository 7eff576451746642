"""CLI interface for promo-countdown."""

import logging
import sys
from dataclasses import replace
from datetime import datetime
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from .countdown_pipeline import encode_countdown
from .errors import ConfigError, RenderFailure
from .output import output_format_for_path, resolve_output_provider, supported_output_formats
from .output.base import OutputProvider
from .settings import CountdownSettings, parse_gif_mode, parse_instant, parse_target_date
from .web import ENDPOINTS, create_app, system_clock

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()

app = typer.Typer(help="Countdown image generator and server.")


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


@app.command()
def render(
    output: str = typer.Argument(..., help=f"Output file ({SUPPORTED_OUTPUT_FORMATS_TEXT})"),
    now: str = typer.Option(
        None,
        "--now",
        help="Render as if the current time were this ISO 8601 timestamp",
    ),
    target: str = typer.Option(
        None,
        "--target",
        "-t",
        help="Target date (ISO 8601); defaults to COUNTDOWN_TARGET_DATE",
    ),
    mode: str = typer.Option(
        None,
        "--mode",
        "-m",
        help="GIF animation mode (pulse, countdown)",
    ),
    event_name: str = typer.Option(
        None,
        "--event-name",
        help="Event name shown once the countdown has expired",
    ),
    no_shadow: bool = typer.Option(
        False,
        "--no-shadow",
        help="Disable box shadows",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Render one countdown image to a file.

    The output format is taken from the file extension.

    Examples:
      # Current countdown as an animated GIF
      promo-countdown render countdown.gif

      # Snapshot two seconds before the target
      promo-countdown render snap.png --target 2025-11-28T00:00:00 --now 2025-11-27T23:59:58
    """
    configure_logging(verbose)
    try:
        settings = _resolve_settings(target, mode, event_name, no_shadow)
        provider = _resolve_provider(output)
        output_format = output_format_for_path(output)
        current = _parse_now(now) if now else system_clock(settings)()

        console.print(f"[bold blue]Generating {output_format.upper()} countdown...[/bold blue]")
        try:
            result = encode_countdown(current, settings, output_format, provider=provider)
        except RenderFailure as e:
            raise CLIError(str(e))

        _write_output(provider, result.content)
        console.print(
            f"[green]✓[/green] {output_format.upper()} saved to {output} "
            f"({result.mode.value}, {max(result.remaining, 0)}s remaining)"
        )

    except (CLIError, ConfigError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Interface to bind; defaults to HOST"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on; defaults to PORT"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Run the countdown HTTP server."""
    import uvicorn

    configure_logging(verbose)
    try:
        settings = CountdownSettings.from_env()
    except ConfigError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    settings = replace(settings, host=host or settings.host, port=port or settings.port)
    logger = logging.getLogger(__name__)
    logger.info("Countdown server running on port %d", settings.port)
    logger.info("Counting down to %s", settings.target_date.isoformat())
    for path in ENDPOINTS:
        logger.info("  http://localhost:%d%s", settings.port, path)

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


def _resolve_settings(
    target: str | None,
    mode: str | None,
    event_name: str | None,
    no_shadow: bool,
) -> CountdownSettings:
    settings = CountdownSettings.from_env()
    overrides: dict[str, object] = {}
    if target:
        overrides["target_date"] = parse_target_date(target)
    if mode:
        overrides["gif_mode"] = parse_gif_mode(mode)
    if event_name:
        overrides["event_name"] = event_name
    if no_shadow:
        overrides["box_shadow"] = False
    return replace(settings, **overrides)


def _parse_now(text: str) -> datetime:
    try:
        return parse_instant(text)
    except ValueError as e:
        raise CLIError(f"Invalid --now value '{text}': {e}")


def _resolve_provider(output: str) -> OutputProvider[Any]:
    try:
        return resolve_output_provider(output)
    except ValueError as e:
        raise CLIError(str(e))


def _write_output(provider: OutputProvider[Any], content: bytes) -> None:
    try:
        provider.write(content)
    except OSError as e:
        raise CLIError(f"Failed to save file '{provider.path}': {e}")


if __name__ == "__main__":
    app()
