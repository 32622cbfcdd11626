import click

from ..utils.constants import VehicleKind
from ..utils.decorators import admin_required, login_required
from .views import list_vehicles, menu, pause, pick_vehicle, screen


@login_required
@admin_required
def view_all(system, session) -> None:
    """Every vehicle with its availability or renter."""
    screen("All Vehicles:")
    for i, v in enumerate(system.all_vehicles(), start=1):
        status = "(Available)" if v.is_available else f"(Rented by: {v.renter})"
        click.echo(f"{i}: {v} {status}")
    click.echo()
    pause()


@login_required
@admin_required
def add_vehicle(system, session) -> bool:
    screen()
    choice = menu("=== Add New Vehicle ===", ["Add Car", "Add Motorcycle", "Back to Menu"])
    if choice == 3:
        return False

    kind = VehicleKind.CAR if choice == 1 else VehicleKind.MOTORCYCLE
    brand = click.prompt("Enter brand")
    model = click.prompt("Enter model")
    rate = click.prompt("Enter daily rate $", type=click.FloatRange(min=0))
    extra_question = "Has AC?" if kind == VehicleKind.CAR else "Include helmet?"
    has_extra = click.confirm(extra_question, default=False)

    ok, msg, _ = system.admin_create_vehicle({
        "brand": brand,
        "model": model,
        "kind": kind,
        "rate": rate,
        "has_extra": has_extra,
    })
    click.echo(msg)
    pause()
    return ok


@login_required
@admin_required
def remove_vehicle(system, session) -> bool:
    screen()
    vehicles = system.list_available()
    removed = False
    if not vehicles:
        click.echo("No available vehicles to remove!")
    else:
        click.echo("Available Vehicles:")
        list_vehicles(vehicles, back=True)
        click.echo()
        index = pick_vehicle(vehicles, "Enter vehicle number to remove")
        if index is not None:
            removed = system.remove_vehicle(index)
            click.echo("Vehicle removed successfully!" if removed else "Failed to remove vehicle!")
    click.echo()
    pause()
    return removed
