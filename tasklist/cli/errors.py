"""CLI error handling: wrap commands to report errors instead of tracebacks."""

from functools import wraps

import typer
from click.exceptions import ClickException, Exit

from tasklist.errors import HomeNotFoundError, ParseError, StoreIOError


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Store errors and bad input are echoed to stderr, then the command exits
    with status 1. Click's own usage errors pass through untouched.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, typer.Exit, Exit, ClickException):
            raise
        except ParseError as e:
            typer.echo(f"Parse error: {e}", err=True)
            raise typer.Exit(1) from e
        except (StoreIOError, OSError) as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e
        except HomeNotFoundError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        except (ValueError, KeyError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
