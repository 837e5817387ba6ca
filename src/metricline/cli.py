"""CLI interface for metricline.

Requires the 'cli' extra: pip install metricline[cli]
"""

from __future__ import annotations

import sys

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install metricline[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from pydantic import ValidationError

from metricline import __version__
from metricline.codec import LineFormat, decode_line, encode_compact, encode_verbose
from metricline.exceptions import MetricLineError
from metricline.models.record import MetricRecord

app = typer.Typer(
    name="metricline",
    help="Encode and decode resource traffic metric lines.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"metricline {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the metricline installation."""
    table = Table(title="metricline info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "prometheus_client", "opentelemetry"]:
        try:
            mod = __import__(dep_name)
            ver = getattr(mod, "__version__", None) or getattr(mod, "VERSION", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def encode(
    resource: str = typer.Argument(..., help="Resource name"),
    timestamp: int = typer.Argument(..., help="Window start, epoch milliseconds"),
    pass_qps: int = typer.Option(0, "--pass", help="Passed QPS"),
    block_qps: int = typer.Option(0, "--block", help="Blocked QPS"),
    complete_qps: int = typer.Option(0, "--complete", help="Completed QPS"),
    error_qps: int = typer.Option(0, "--error", help="Error QPS"),
    avg_rt: int = typer.Option(0, "--rt", help="Average response time"),
    occupied_pass_qps: int = typer.Option(0, "--occupied", help="Occupied pass QPS"),
    concurrency: int = typer.Option(0, "--concurrency", help="In-flight requests"),
    classification: int = typer.Option(0, "--classification", help="Classification tag"),
    compact: bool = typer.Option(False, "--compact", "-c", help="Emit the compact format"),
) -> None:
    """Encode a single record as a metric line."""
    try:
        record = MetricRecord(
            resource=resource,
            timestamp=timestamp,
            pass_qps=pass_qps,
            block_qps=block_qps,
            complete_qps=complete_qps,
            error_qps=error_qps,
            avg_rt=avg_rt,
            occupied_pass_qps=occupied_pass_qps,
            concurrency=concurrency,
            classification=classification,
        )
        line = encode_compact(record) if compact else encode_verbose(record)
    except (ValidationError, MetricLineError) as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    typer.echo(line)


@app.command()
def decode(
    line: str = typer.Argument(..., help="Metric line to decode"),
    compact: bool = typer.Option(False, "--compact", "-c", help="Line is in the compact format"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
) -> None:
    """Decode a metric line and print its fields."""
    fmt = LineFormat.COMPACT if compact else LineFormat.VERBOSE
    try:
        record = decode_line(line, fmt)
    except MetricLineError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(record.model_dump_json())
        return

    table = Table(title=f"{fmt} metric line")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for name, value in record.model_dump().items():
        table.add_row(name, escape(str(value)))
    console.print(table)


if __name__ == "__main__":
    app()
