"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..adapters.memory_store import InMemoryBookingStore
from ..adapters.sql_store import SqlBookingStore
from ..adapters.whatsapp import build_whatsapp_link
from ..config import AppConfig, load_config
from ..domain.exceptions import BookingError
from ..domain.models import BookingRequest, TrafficLevel
from ..domain.slot_calculator import ensure_scheduled_time, parse_date
from ..services.booking import BookingService

app = typer.Typer(
    name="sudpen",
    help="Show bookable slots and record appointments",
    add_completion=False
)

console = Console()

TRAFFIC_STYLES = {
    TrafficLevel.LOW: "green",
    TrafficLevel.MEDIUM: "yellow",
    TrafficLevel.HIGH: "red",
}

TRAFFIC_LABELS = {
    TrafficLevel.LOW: "Poco affollato",
    TrafficLevel.MEDIUM: "Affollamento medio",
    TrafficLevel.HIGH: "Molto affollato",
}

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]
MockOption = Annotated[
    bool,
    typer.Option("--mock", help="Use an in-memory store instead of the database.")
]


def _build_service(config: AppConfig, mock: bool, quiet: bool = False) -> BookingService:
    if mock:
        if not quiet:
            console.print("[yellow]⚠  MOCK: archivio in memoria, le prenotazioni non vengono salvate[/yellow]\n")
        return BookingService(store=InMemoryBookingStore())
    return BookingService(store=SqlBookingStore(config.database_url))


def _fail(error: Exception) -> None:
    console.print(f"[bold red]Errore:[/bold red] {escape(str(error))}")
    raise typer.Exit(1)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Sudpen booking tool.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def slots(
    date: Annotated[Optional[str], typer.Argument(help="Date (YYYY-MM-DD). Defaults to today.")] = None,
    config_file: ConfigOption = None,
    mock: MockOption = False,
    assume_available: Annotated[
        bool,
        typer.Option("--assume-available", help="Show all slots as free if the store cannot be read.")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the slots as JSON.")] = False,
):
    """
    List the slots of a day with traffic level and availability.

    Examples:

        sudpen slots
        sudpen slots 2024-11-27
        sudpen slots 2024-11-27 --mock
        sudpen slots 2024-11-27 --json
    """
    try:
        config = load_config(config_file)
        # "today" is resolved here, the engine only sees explicit dates
        day = parse_date(date or config.today())
        service = _build_service(config, mock, quiet=as_json)
        day_slots = service.get_slots(day, assume_available_on_store_error=assume_available)
    except (BookingError, FileNotFoundError, ValueError) as e:
        _fail(e)

    if as_json:
        console.print_json(data=[slot.to_dict() for slot in day_slots])
        return

    if not day_slots:
        console.print(f"[yellow]Nessun orario disponibile per il {day.isoformat()} (chiuso).[/yellow]")
        return

    table = Table(
        title=f"{config.business_name} - Orari disponibili {day.isoformat()}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Ora", style="bold")
    table.add_column("Affollamento")
    table.add_column("Stato")

    for slot in day_slots:
        style = TRAFFIC_STYLES[slot.traffic_level]
        table.add_row(
            slot.label,
            f"[{style}]{TRAFFIC_LABELS[slot.traffic_level]}[/{style}]",
            "[green]libero[/green]" if slot.available else "[dim]occupato[/dim]"
        )

    free = sum(1 for slot in day_slots if slot.available)

    console.print()
    console.print(table)
    console.print(f"\n{free}/{len(day_slots)} orari liberi\n")


@app.command()
def book(
    date: Annotated[str, typer.Argument(help="Date (YYYY-MM-DD)")],
    time: Annotated[str, typer.Argument(help="Slot time (HH:MM)")],
    name: Annotated[str, typer.Option("--name", "-n", help="Customer name")],
    email: Annotated[str, typer.Option("--email", "-e", help="Customer email")],
    phone: Annotated[Optional[str], typer.Option("--phone", "-p", help="Customer phone")] = None,
    config_file: ConfigOption = None,
    mock: MockOption = False,
):
    """
    Book a slot for a customer.
    """
    try:
        config = load_config(config_file)
        service = _build_service(config, mock)
        booking_id = service.book(
            BookingRequest(
                date=date,
                time_slot=time,
                customer_name=name,
                customer_email=email,
                customer_phone=phone,
            )
        )
    except (BookingError, FileNotFoundError, ValueError) as e:
        _fail(e)

    console.print(f"[green]✓ Prenotazione #{booking_id} registrata: {date} alle {time}[/green]")


@app.command()
def bookings(
    date: Annotated[str, typer.Argument(help="Date (YYYY-MM-DD)")],
    config_file: ConfigOption = None,
):
    """
    List the bookings recorded for a day.
    """
    try:
        config = load_config(config_file)
        day = parse_date(date)
        records = SqlBookingStore(config.database_url).list_bookings(day.isoformat())
    except (BookingError, FileNotFoundError, ValueError) as e:
        _fail(e)

    if not records:
        console.print(f"[yellow]Nessuna prenotazione per il {day.isoformat()}.[/yellow]")
        return

    table = Table(title=f"Prenotazioni {day.isoformat()}", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim")
    table.add_column("Ora", style="bold")
    table.add_column("Cliente", style="bold yellow")
    table.add_column("E-mail", style="dim")
    table.add_column("Telefono", style="dim")

    for record in records:
        table.add_row(
            str(record.id),
            record.time_slot,
            record.customer_name,
            record.customer_email,
            record.customer_phone or "-"
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def link(
    date: Annotated[str, typer.Argument(help="Date (YYYY-MM-DD)")],
    time: Annotated[str, typer.Argument(help="Slot time (HH:MM)")],
    config_file: ConfigOption = None,
):
    """
    Print the WhatsApp link that requests a slot from the front desk.
    """
    try:
        config = load_config(config_file)
        day = parse_date(date)
        # only slots the schedule actually offers can be requested
        label = ensure_scheduled_time(day, time)
        url = build_whatsapp_link(config.whatsapp_number, label, day, config.locale)
    except (BookingError, FileNotFoundError, ValueError) as e:
        _fail(e)

    # soft_wrap keeps the URL on one line
    console.print(url, soft_wrap=True)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]sudpen[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
