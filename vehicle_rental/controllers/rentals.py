import click

from ..models.rental import Receipt
from ..utils.constants import DEFAULT_TIMEZONE, MAX_RENTAL_DAYS, MIN_RENTAL_DAYS
from ..utils.decorators import login_required
from ..utils.filters import fmt_iso_local, fmt_money
from .views import list_vehicles, pause, pick_vehicle, screen


def render_receipt(receipt: Receipt, tz_name: str = DEFAULT_TIMEZONE) -> str:
    lines = [
        "=== Rental Receipt ===",
        f"Vehicle: {receipt.vehicle}",
        f"Days rented: {receipt.days}",
        f"Base rate: {fmt_money(receipt.rate)}/day",
        f"Base cost: {fmt_money(receipt.base)}",
    ]
    if receipt.has_extra:
        lines.append(f"{receipt.extra_label} charge: {fmt_money(receipt.extra)}")
    lines.append(f"Total cost: {fmt_money(receipt.total)}")
    lines.append(f"Issued: {fmt_iso_local(receipt.issued_at, tz_name)}")
    return "\n".join(lines)


@login_required
def view_available(system, session) -> None:
    screen("Available Vehicles:")
    list_vehicles(system.list_available())
    click.echo()
    pause()


@login_required
def return_rental(system, session) -> bool:
    user = session.user
    vehicle = system.rented_vehicle(user)
    if vehicle is None:
        click.echo("You have no vehicle to return.")
        pause()
        return False

    click.echo(f"Currently rented vehicle: {vehicle}")
    returned = False
    if click.confirm("Are you sure you want to return this vehicle?", default=False):
        returned = system.return_vehicle(user)
        click.echo("Vehicle returned successfully!" if returned else "Return failed!")
    click.echo()
    pause()
    return returned


@login_required
def rent(system, session, max_days: int = MAX_RENTAL_DAYS, tz_name: str = DEFAULT_TIMEZONE) -> bool:
    user = session.user
    if not system.can_rent(user):
        click.echo("You already have an active rental!")
        click.echo("Please return your current rental before renting another vehicle.")
        click.echo()
        pause()
        return False

    vehicles = system.list_available()
    if not vehicles:
        click.echo("No vehicles available for rent!")
        pause()
        return False

    click.echo("Available Vehicles:")
    list_vehicles(vehicles, back=True)
    click.echo()
    index = pick_vehicle(vehicles, "Enter your choice")
    if index is None:
        return False

    days = click.prompt(f"Enter number of days ({MIN_RENTAL_DAYS}-{max_days})",
                        type=click.IntRange(MIN_RENTAL_DAYS, max_days))

    if not system.rent(index, days, user):
        click.echo("Rental failed!")
        click.echo()
        pause()
        return False

    screen()
    click.echo(render_receipt(system.receipt(user, days), tz_name))
    click.echo("\nThank you for your rental!")
    click.echo()
    pause()
    return True


def rent_or_return(system, session, max_days: int = MAX_RENTAL_DAYS, tz_name: str = DEFAULT_TIMEZONE):
    """Second customer menu entry: its action follows the active-rental flag."""
    screen()
    if session.user is not None and session.user.has_active_rental:
        return return_rental(system, session)
    return rent(system, session, max_days=max_days, tz_name=tz_name)
