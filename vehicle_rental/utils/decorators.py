from functools import wraps

import click


def login_required(fn):
    """Menu handler guard: `fn(system, session, ...)` runs only for a logged-in session."""
    @wraps(fn)
    def wrapper(system, session, *args, **kwargs):
        if session is None or not session.is_authenticated:
            click.echo("Please login first")
            return None
        return fn(system, session, *args, **kwargs)

    return wrapper


def admin_required(fn):
    @wraps(fn)
    def wrapper(system, session, *args, **kwargs):
        if not system.is_admin(session):
            click.echo("Insufficient permission")
            return None
        return fn(system, session, *args, **kwargs)

    return wrapper
