"""Actuator Hunter CLI - standalone host for the scan check."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from actuator_hunter import __version__
from actuator_hunter.core.config import Settings
from actuator_hunter.core.exceptions import ActuatorHunterError
from actuator_hunter.core.logging import configure_logging
from actuator_hunter.core.models import HttpRequest
from actuator_hunter.prober.scanner import ActuatorProber
from actuator_hunter.prober.signatures import DEFAULT_SIGNATURES, load_signatures
from actuator_hunter.prober.transport import HttpxTransport

app = typer.Typer(
    name="actuator-hunter",
    help="Hunt for exposed Spring Boot Actuator endpoints",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

EXIT_FINDINGS = 2


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        console.print(f"Actuator Hunter v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Actuator Hunter - Spring Boot Actuator exposure scanner."""
    pass


def _resolve_signatures(settings: Settings, signatures: Optional[Path]):
    path = signatures or settings.signatures_file
    if path is None:
        return DEFAULT_SIGNATURES
    return load_signatures(path)


@app.command()
def scan(
    target: str = typer.Argument(..., help="Base URL of the target, e.g. https://app.example.com"),
    config: Optional[Path] = typer.Option(None, help="Path to configuration file"),
    signatures: Optional[Path] = typer.Option(None, help="YAML file replacing the built-in signature table"),
    output: Optional[Path] = typer.Option(None, help="Write findings as JSON to this file"),
    json_logs: bool = typer.Option(False, "--json-logs/--console-logs", help="Emit JSON log lines"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log failed probes"),
) -> None:
    """
    Probe a target for exposed actuator endpoints.

    Exits with status 2 when at least one endpoint is exposed.
    """
    try:
        settings = Settings.from_file_or_default(config)
        table = _resolve_signatures(settings, signatures)
        base_request = HttpRequest.from_url(target)
    except (ActuatorHunterError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    level = "DEBUG" if verbose else settings.logging.level
    log_file = str(settings.logging.log_file) if settings.logging.log_file else None
    logger = configure_logging(
        level=level,
        json_format=json_logs or settings.logging.json_format,
        log_file=log_file,
    )

    console.print(Panel.fit(
        f"[bold cyan]Target:[/bold cyan] {base_request.service.base_url}\n"
        f"[bold cyan]Signatures:[/bold cyan] {len(table)}\n"
        f"[bold cyan]Timeout:[/bold cyan] {settings.prober.timeout}s",
        title="Actuator Hunter",
    ))

    with HttpxTransport(settings.prober) as transport:
        prober = ActuatorProber(
            transport=transport,
            signatures=table,
            user_agent=settings.prober.user_agent,
            logger=logger,
        )
        result = prober.scan_with_diagnostics(base_request)

    if result.findings:
        findings_table = Table(title="Exposed Endpoints")
        findings_table.add_column("Issue", style="bold red")
        findings_table.add_column("URL", style="cyan")
        findings_table.add_column("Severity")
        findings_table.add_column("Confidence")
        for finding in result.findings:
            findings_table.add_row(
                finding.name,
                finding.evidence.request.url,
                finding.severity.value.upper(),
                finding.confidence.value,
            )
        console.print(findings_table)
    else:
        console.print("[green]✓ No exposed actuator endpoints found[/green]")

    if result.failures:
        console.print(f"[yellow]⚠ {len(result.failures)} probe(s) could not be completed[/yellow]")
        for failure in result.failures:
            console.print(f"  • {failure.url}: {failure.error}")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w") as f:
            json.dump(
                [finding.model_dump(mode="json") for finding in result.findings],
                f,
                indent=2,
            )
        console.print(f"[green]✓ Findings written to {output}[/green]")

    if result.findings:
        raise typer.Exit(EXIT_FINDINGS)


@app.command("signatures")
def list_signatures(
    config: Optional[Path] = typer.Option(None, help="Path to configuration file"),
    signatures: Optional[Path] = typer.Option(None, help="YAML file replacing the built-in signature table"),
) -> None:
    """List the signatures that a scan would probe, in probe order."""
    try:
        settings = Settings.from_file_or_default(config)
        table = _resolve_signatures(settings, signatures)
    except ActuatorHunterError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    listing = Table(title="Actuator Signatures")
    listing.add_column("#", justify="right")
    listing.add_column("Path", style="cyan")
    listing.add_column("Keyword")
    listing.add_column("Issue")
    for index, signature in enumerate(table, start=1):
        listing.add_row(
            str(index),
            signature.path,
            signature.signature_keyword,
            signature.issue_name,
        )
    console.print(listing)


if __name__ == "__main__":
    app()
