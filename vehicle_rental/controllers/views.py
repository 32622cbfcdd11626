"""Shared screen helpers for the console menus."""
import click

from ..models.vehicle import Vehicle

PAUSE_TEXT = "Press Enter to continue..."


def screen(title: str = "") -> None:
    """Clear the terminal (no-op when not a tty) and print a heading."""
    click.clear()
    if title:
        click.echo(title)


def pause() -> None:
    click.pause(PAUSE_TEXT)


def menu(title: str, options: list[str]) -> int:
    """Print a numbered menu and return the chosen option (1-based)."""
    click.echo(title)
    for i, label in enumerate(options, start=1):
        click.echo(f"{i}. {label}")
    click.echo()
    return click.prompt("Choose an option", type=click.IntRange(1, len(options)))


def list_vehicles(vehicles: list[Vehicle], back: bool = False) -> None:
    for i, v in enumerate(vehicles, start=1):
        click.echo(f"{i}: {v}")
    if back:
        click.echo(f"{len(vehicles) + 1}: Back to Menu")


def pick_vehicle(vehicles: list[Vehicle], prompt: str):
    """
    Ask for a vehicle number from a list that ends with "Back to Menu".
    Returns the 0-based index, or None when the user went back.
    """
    selection = click.prompt(prompt, type=click.IntRange(1, len(vehicles) + 1))
    if selection == len(vehicles) + 1:
        return None
    return selection - 1
