"""CLI entry point for the contact parser."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from contact_parser.batch import BatchProcessor
from contact_parser.config import DEFAULT_CONFIG, load_config
from contact_parser.export import to_csv, to_vcard
from contact_parser.models.contact import ParsedContact
from contact_parser.parser import ContactParser

app = typer.Typer(
    name="cardparse",
    help="Parse business card OCR text into structured contact information.",
    add_completion=False,
)
console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="JSON file overriding parser constants",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Log extraction details",
    ),
]


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _create_parser(config_path: Path | None) -> ContactParser:
    config = load_config(config_path) if config_path else DEFAULT_CONFIG
    return ContactParser(config=config)


def _read_text(source: str) -> str:
    """Read OCR text from a file path, or from stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    return path.read_text(encoding="utf-8")


@app.command()
def parse(
    source: Annotated[
        str,
        typer.Argument(
            help="Text file with OCR output, or '-' for stdin",
        ),
    ],
    output_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output raw JSON instead of formatted output",
        ),
    ] = False,
    output_vcard: Annotated[
        bool,
        typer.Option(
            "--vcard",
            help="Output a vCard instead of formatted output",
        ),
    ] = False,
    require_valid: Annotated[
        bool,
        typer.Option(
            "--require-valid",
            help="Exit with status 2 if the contact lacks a name plus phone or email",
        ),
    ] = False,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """Parse OCR text from one business card."""
    _setup_logging(verbose)
    try:
        parser = _create_parser(config)
        contact = parser.parse(_read_text(source))
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if output_json:
        print(contact.model_dump_json(indent=2))
    elif output_vcard:
        print(to_vcard(contact), end="")
    else:
        _print_formatted(contact)

    if require_valid and not contact.is_valid_for_saving:
        raise typer.Exit(2)


def _print_formatted(contact: ParsedContact):
    """Print formatted contact info."""
    console.print()

    console.print(f"[bold cyan]{contact.full_name or 'Unknown'}[/bold cyan]")
    if contact.job_title:
        console.print(f"[dim]{contact.job_title}[/dim]")
    if contact.organization_name:
        console.print(f"[green]{contact.organization_name}[/green]")

    console.print()

    table = Table(show_header=False, box=None)
    table.add_column("Type", style="dim")
    table.add_column("Value")
    table.add_column("Status")

    for phone in contact.phone_numbers:
        table.add_row(f"Phone ({phone.label})", phone.formatted_number, _status(phone.is_valid))
    for email in contact.email_addresses:
        table.add_row("Email", email.address, _status(email.is_valid))
    for url in contact.urls:
        table.add_row("Website", url.url, _status(url.is_valid))
    for profile in contact.social_profiles:
        table.add_row(profile.service, profile.username, _status(profile.is_valid))

    if table.row_count:
        console.print(table)
        console.print()

    scores = contact.confidence_scores
    border = "green" if contact.is_valid_for_saving else "yellow"
    verdict = "ready to save" if contact.is_valid_for_saving else "needs review"
    console.print(
        Panel(
            f"name {scores.name:.2f}  phone {scores.phone:.2f}  email {scores.email:.2f}  "
            f"organization {scores.organization:.2f}\n"
            f"overall [bold]{scores.overall:.2f}[/bold] - {verdict}",
            title="Confidence",
            border_style=border,
        )
    )


def _status(is_valid: bool) -> str:
    return "[green]ok[/green]" if is_valid else "[yellow]check[/yellow]"


@app.command()
def batch(
    inputs: Annotated[
        list[Path],
        typer.Argument(
            help="Text files or directories to process",
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (JSON or CSV)",
        ),
    ],
    format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format: json or csv",
        ),
    ] = "json",
    config: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """Parse multiple OCR text files."""
    _setup_logging(verbose)

    format = format.lower()
    if format not in ("json", "csv"):
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Use 'json' or 'csv'.")
        raise typer.Exit(1)

    try:
        parser = _create_parser(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    processor = BatchProcessor(parser)
    files = processor.collect_files(inputs)

    if not files:
        console.print("[yellow]Warning:[/yellow] No text files found to process.")
        raise typer.Exit(0)

    console.print(f"Processing {len(files)} file(s)...")

    result = processor.process(files)

    if format == "csv":
        content = processor.to_csv(result)
    else:
        content = processor.to_json(result)

    output.write_text(content, encoding="utf-8")

    console.print(
        f"[green]Done:[/green] {result.succeeded} parsed "
        f"({result.ready_to_save} ready to save), "
        f"{result.failed} failed, {result.total_time_ms:.1f}ms total"
    )
    console.print(f"Output: {output}")


@app.command()
def export(
    source: Annotated[
        str,
        typer.Argument(
            help="Text file with OCR output, or '-' for stdin",
        ),
    ],
    format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Export format: vcard or csv",
        ),
    ] = "vcard",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write to this file instead of stdout",
        ),
    ] = None,
    config: ConfigOption = None,
):
    """Parse OCR text and export the contact as vCard or CSV."""
    format = format.lower()
    if format not in ("vcard", "csv"):
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Use 'vcard' or 'csv'.")
        raise typer.Exit(1)

    try:
        contact = _create_parser(config).parse(_read_text(source))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    content = to_vcard(contact) if format == "vcard" else to_csv([contact])

    if output:
        output.write_text(content, encoding="utf-8", newline="")
        console.print(f"Output: {output}")
    else:
        print(content, end="")


@app.command()
def version():
    """Show version information."""
    from contact_parser import __version__

    console.print(f"cardparse version {__version__}")


if __name__ == "__main__":
    app()
