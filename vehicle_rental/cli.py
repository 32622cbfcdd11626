import logging

import click

from . import create_system
from .config import LOG_LEVELS, Config, setup_logging
from .controllers import auth, rentals, staff
from .controllers.views import menu, screen
from .models.user import Session

logger = logging.getLogger(__name__)


def run_console(system, max_days: int = Config.MAX_RENTAL_DAYS, tz_name: str = Config.TIMEZONE) -> None:
    """Menu loop for one interactive session; returns when the user exits."""
    session = Session()

    while True:
        screen()
        if not session.is_authenticated:
            choice = menu("Vehicle Rental System", ["Login", "Register", "Exit"])
            if choice == 1:
                session = auth.login(system) or session
            elif choice == 2:
                auth.register(system)
            else:
                click.echo("Goodbye!")
                return
            continue

        if system.is_admin(session):
            choice = menu("Welcome, Administrator",
                          ["View all vehicles", "Add new vehicle", "Remove vehicle", "Logout"])
            if choice == 1:
                staff.view_all(system, session)
            elif choice == 2:
                staff.add_vehicle(system, session)
            elif choice == 3:
                staff.remove_vehicle(system, session)
            else:
                session = system.logout(session)
            continue

        rent_label = "Return vehicle" if session.user.has_active_rental else "Rent a vehicle"
        choice = menu(f"Welcome, {session.username}",
                      ["View available vehicles", rent_label, "Logout"])
        if choice == 1:
            rentals.view_available(system, session)
        elif choice == 2:
            rentals.rent_or_return(system, session, max_days=max_days, tz_name=tz_name)
        else:
            session = system.logout(session)


@click.command()
@click.option("--users-file", type=click.Path(dir_okay=False), default=None,
              help="Credentials file (username:password per line).")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help="Logging level.")
def main(users_file, log_level):
    """Console vehicle rental manager."""
    setup_logging(log_level or Config.LOG_LEVEL)
    path = users_file or Config.USERS_FILE
    logger.info("Using users file: %s", path)

    system = create_system(
        users_file=path,
        admin_username=Config.ADMIN_USERNAME,
        admin_password=Config.ADMIN_PASSWORD,
    )
    run_console(system, max_days=Config.MAX_RENTAL_DAYS, tz_name=Config.TIMEZONE)


if __name__ == "__main__":
    main()
