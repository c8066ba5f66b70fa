"""
CLI entry point for pylot-content.

This module provides the Typer-based command-line interface.

Commands:
    serve       Run the MCP server over stdio
    tools       List the MCP tools the server exposes
    catalog     Show the virtual tool catalog for a domain
    call        Invoke one tool and print its JSON result
    doctor      Check settings and upstream connectivity

Architecture Note:
    The CLI is thin: it loads settings, builds a ToolContext
    and dispatches through the same tool registry the MCP server uses.
"""

import json
import sys
import traceback
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from pylot_content import __version__
from pylot_content.client import ContentApiClient
from pylot_content.errors import ContentApiError
from pylot_content.log import configure_logging
from pylot_content.schema import Settings, load_settings
from pylot_content.tools import ToolContext, default_registry

# Initialize Typer app with metadata
app = typer.Typer(
    name="pylot-content",
    help="Read-only MCP adapter for a headless content API.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold]pylot-content[/bold] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to a YAML settings file. Environment variables still win.",
            exists=True,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    """
    pylot-content - Expose a headless content API as MCP tools.
    """
    ctx.obj = {"config": config}


# =============================================================================
# Helpers
# =============================================================================


def _settings(ctx: typer.Context) -> Settings:
    """Load settings for a command, exiting with code 1 on bad input."""
    config = (ctx.obj or {}).get("config")
    try:
        return load_settings(config)
    except (OSError, ValueError, ValidationError) as e:
        console.print(f"[red]Error loading settings: {e}[/red]")
        raise typer.Exit(code=1)


def build_context(settings: Settings) -> ToolContext:
    """Create the tool context (and its upstream client) for a command."""
    return ToolContext(settings=settings, client=ContentApiClient(settings))


def _parse_cli_args(pairs: list[str], args_json: str | None) -> dict[str, Any]:
    """Merge --args-json and key=value pairs into one arguments dict."""
    arguments: dict[str, Any] = {}

    if args_json:
        try:
            loaded = json.loads(args_json)
        except json.JSONDecodeError as e:
            raise typer.BadParameter(f"not valid JSON: {e}", param_hint="--args-json")
        if not isinstance(loaded, dict):
            raise typer.BadParameter("must be a JSON object", param_hint="--args-json")
        arguments.update(loaded)

    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {pair!r}", param_hint="--arg")
        arguments[key] = value

    return arguments


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _output_json_error(error: Exception, include_traceback: bool = False) -> None:
    """Output an error in JSON format."""
    if isinstance(error, ContentApiError):
        output = {"error": True, **error.to_dict()}
    else:
        output = {"error": True, "error_type": type(error).__name__, "message": str(error)}
    if include_traceback:
        output["traceback"] = traceback.format_exc()
    _print_json(output)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def serve(ctx: typer.Context) -> None:
    """
    Run the MCP server over stdio.

    Logs go to stderr; stdout carries the protocol stream.

    Example:
        $ pylot-content serve
    """
    from pylot_content.server import run_server

    settings = _settings(ctx)
    configure_logging(settings.log_level)
    run_server(settings)


@app.command()
def tools(ctx: typer.Context) -> None:
    """
    List the MCP tools the server exposes.

    Example:
        $ pylot-content tools
    """
    settings = _settings(ctx)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Tool", style="cyan")
    table.add_column("Arguments")
    table.add_column("Description")

    for entry in default_registry.describe(settings.default_domain):
        schema = entry["inputSchema"]
        required = set(schema.get("required", []))
        arguments = ", ".join(
            f"[bold]{name}[/bold]" if name in required else name
            for name in schema.get("properties", {})
        )
        table.add_row(entry["name"], arguments, entry["description"])

    console.print(table)


@app.command()
def catalog(
    ctx: typer.Context,
    domain: Annotated[
        Optional[str],
        typer.Argument(help="Domain to describe. Defaults to the configured domain."),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output the catalog document as JSON.",
        ),
    ] = False,
) -> None:
    """
    Show the virtual tool catalog for a domain.

    Example:
        $ pylot-content catalog www.example.com --json
    """
    settings = _settings(ctx)
    context = build_context(settings)

    try:
        document = default_registry.dispatch(
            "content_tools_for_domain", {"domain": domain} if domain else {}, context
        )
    except ContentApiError as e:
        if json_output:
            _output_json_error(e)
        else:
            console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    finally:
        context.client.close()

    if json_output:
        _print_json(document)
        return

    console.print(f"Catalog for [bold]{document['domain']}[/bold]")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Group", style="cyan")
    table.add_column("Virtual tool")
    table.add_column("Calls", style="dim")

    for group in document["registry"]:
        for tool in group["tools"]:
            table.add_row(
                group["contentType"],
                tool["name"],
                tool["call_example"]["params"]["name"],
            )

    console.print(table)

    aliases = ", ".join(f"{alias} -> {target}" for alias, target in document["aliases"].items())
    console.print(f"[dim]Aliases: {aliases}[/dim]")


@app.command()
def call(
    ctx: typer.Context,
    tool_name: Annotated[
        str,
        typer.Argument(help="Name of the tool to invoke (see `pylot-content tools`)."),
    ],
    arg: Annotated[
        Optional[list[str]],
        typer.Option(
            "--arg",
            "-a",
            help="Tool argument as key=value. Repeatable.",
        ),
    ] = None,
    args_json: Annotated[
        Optional[str],
        typer.Option(
            "--args-json",
            help="Tool arguments as a JSON object.",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Include tracebacks in error output.",
        ),
    ] = False,
) -> None:
    """
    Invoke one tool and print its JSON result.

    Exits with code 1 when the tool fails.

    Example:
        $ pylot-content call get_item_by_slug -a contentType=blogs -a slug=hello-world
    """
    settings = _settings(ctx)
    arguments = _parse_cli_args(arg or [], args_json)
    context = build_context(settings)

    try:
        result = default_registry.dispatch(tool_name, arguments, context)
    except ContentApiError as e:
        _output_json_error(e, include_traceback=debug)
        raise typer.Exit(code=1)
    finally:
        context.client.close()

    _print_json(result)


@app.command()
def doctor(
    ctx: typer.Context,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results in JSON format.",
        ),
    ] = False,
) -> None:
    """
    Check settings and upstream connectivity.

    Verifies:
    - Python version (3.11+)
    - Settings load cleanly
    - The content-types endpoint answers for the default domain

    Example:
        $ pylot-content doctor
    """
    checks = []
    all_ok = True

    # Check 1: Python version
    py_version = sys.version_info
    py_ok = py_version >= (3, 11)
    checks.append({
        "name": "Python version",
        "ok": py_ok,
        "value": f"{py_version.major}.{py_version.minor}.{py_version.micro}",
        "message": "OK" if py_ok else "Requires Python 3.11+",
    })
    all_ok = all_ok and py_ok

    # Check 2: Settings
    settings = _settings(ctx)
    checks.append({
        "name": "Settings",
        "ok": True,
        "value": f"{settings.api_base}/{settings.api_version}",
        "message": f"default domain {settings.default_domain}",
    })

    # Check 3: Upstream content types
    context = build_context(settings)
    try:
        content_types = context.client.content_types(settings.default_domain)
        upstream_ok = True
        upstream_message = f"{len(content_types)} content type(s)"
    except ContentApiError as e:
        upstream_ok = False
        upstream_message = e.message
    finally:
        context.client.close()

    checks.append({
        "name": "Content API",
        "ok": upstream_ok,
        "value": settings.default_domain,
        "message": upstream_message,
    })
    all_ok = all_ok and upstream_ok

    if json_output:
        _print_json({"ok": all_ok, "checks": checks})
    else:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Check")
        table.add_column("Status", width=6)
        table.add_column("Value", style="cyan")
        table.add_column("Message")
        for check in checks:
            status = "[green]✓[/green]" if check["ok"] else "[red]✗[/red]"
            table.add_row(check["name"], status, check["value"], check["message"])
        console.print(table)

    if not all_ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
