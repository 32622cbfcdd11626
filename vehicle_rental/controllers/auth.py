import re
from typing import Optional

import click

from ..models.user import Session
from .views import pause, screen

# Stored as `username:secret` lines, so neither may contain ':' or a line break
FIELD_PATTERN = re.compile(r"^[^:\r\n]+$")


def _valid_field(value: str) -> bool:
    return bool(value.strip()) and bool(FIELD_PATTERN.match(value))


def login(system) -> Optional[Session]:
    screen("=== Login ===")
    username = click.prompt("Username", default="", show_default=False)
    password = click.prompt("Password", default="", show_default=False, hide_input=True)

    session = system.login(username, password)
    if session is None:
        click.echo("Invalid credentials!")
        pause()
    return session


def register(system) -> bool:
    screen("=== Register ===")
    username = click.prompt("Enter new username")

    if not _valid_field(username):
        click.echo("Username cannot be blank or contain ':'.")
        pause()
        return False

    if system.user_exists(username):
        click.echo("Username already exists!")
        pause()
        return False

    password = click.prompt("Enter password", hide_input=True)
    if not _valid_field(password):
        click.echo("Password cannot be blank or contain ':'.")
        pause()
        return False

    ok = system.register(username, password)
    click.echo("Registration successful!" if ok else "Registration failed!")
    pause()
    return ok
