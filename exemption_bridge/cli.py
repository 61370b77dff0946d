"""Command line interface for Exemption Bridge.

Commands:
    request   Run one exemption negotiation and print the outcome
    status    Print platform capability and exemption status, no prompting
    serve     Serve the method channel over HTTP

Configuration comes from the environment (see ExemptionBridgeConfig);
options override it per invocation. Log lines go to stderr so command
output stays parseable.
"""

import dataclasses
import json
import sys
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exemption_bridge import __version__
from exemption_bridge.bootstrap.correlation import (
    generate_correlation_id,
    set_correlation_id,
)
from exemption_bridge.bootstrap.exemption import build_negotiator, build_ports
from exemption_bridge.bootstrap.logging import configure_structlog
from exemption_bridge.config.bridge_config import ExemptionBridgeConfig
from exemption_bridge.domain.exceptions import ExemptionBridgeError


class OutputFormat(str, Enum):
    """Output format options."""

    text = "text"
    json = "json"


app = typer.Typer(
    name="exemption-bridge",
    help="Negotiate battery optimization exemption for an Android application",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"exemption-bridge version {__version__}")
        raise typer.Exit()


def _load_config(
    application_id: Optional[str],
    serial: Optional[str],
    stub: bool,
) -> ExemptionBridgeConfig:
    """Apply command line overrides to the environment configuration."""
    config = ExemptionBridgeConfig.from_environment()
    overrides: dict[str, object] = {}
    if application_id:
        overrides["application_id"] = application_id
    if serial:
        overrides["device_serial"] = serial
    if stub:
        overrides["use_stubs"] = True
    try:
        config = dataclasses.replace(config, **overrides)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    configure_structlog(config.environment, stream=sys.stderr)
    set_correlation_id(generate_correlation_id())
    return config


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Exemption Bridge.

    Ask the platform to exempt an application from battery optimization.
    """
    pass


@app.command()
def request(
    application_id: Optional[str] = typer.Option(
        None, "--application-id", "-a", help="Package to request exemption for."
    ),
    serial: Optional[str] = typer.Option(
        None, "--serial", "-s", help="Target device serial."
    ),
    stub: bool = typer.Option(False, "--stub", help="Use in-memory platform stubs."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", "-f", help="Output format."
    ),
) -> None:
    """Run one exemption negotiation.

    Exits 0 whenever an outcome was produced, including false.
    """
    config = _load_config(application_id, serial, stub)
    outcome = build_negotiator(config).request_exemption()

    if output_format == OutputFormat.json:
        typer.echo(json.dumps(outcome.to_dict()))
        return

    color = "green" if outcome.granted else "yellow"
    granted = str(outcome.granted).lower()
    console.print(f"[{color}]{granted}[/{color}] ({outcome.state.value})")
    if not outcome.granted:
        console.print(
            "Open Settings > Battery optimization and allow "
            f"{outcome.application_id} to run in the background."
        )


@app.command()
def status(
    application_id: Optional[str] = typer.Option(
        None, "--application-id", "-a", help="Package to check."
    ),
    serial: Optional[str] = typer.Option(
        None, "--serial", "-s", help="Target device serial."
    ),
    stub: bool = typer.Option(False, "--stub", help="Use in-memory platform stubs."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", "-f", help="Output format."
    ),
) -> None:
    """Show capability and exemption status without prompting."""
    config = _load_config(application_id, serial, stub)
    ports = build_ports(config)

    try:
        supported = ports.capability_gate.supports_exemption()
        exempt = (
            ports.power_policy.is_exempt(config.application_id) if supported else None
        )
    except ExemptionBridgeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.json:
        typer.echo(
            json.dumps(
                {
                    "application_id": config.application_id,
                    "supported": supported,
                    "exempt": exempt,
                }
            )
        )
        return

    table = Table(title="Battery Optimization Exemption")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Application", config.application_id)
    table.add_row("Supported", "yes" if supported else "no (not needed)")
    table.add_row("Exempt", "n/a" if exempt is None else ("yes" if exempt else "no"))
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address."),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port."),
) -> None:
    """Serve the method channel over HTTP."""
    import uvicorn

    config = ExemptionBridgeConfig.from_environment()
    configure_structlog(config.environment)
    uvicorn.run("exemption_bridge.api.main:app", host=host, port=port)


if __name__ == "__main__":
    app()
