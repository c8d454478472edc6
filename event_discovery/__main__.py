"""
Main Entry Point for Event Discovery Search

This module serves as the entry point when the package runs as a command-line
application. It initializes the configuration and registries, then hands over
to the Click command group.

Example Usage:
    $ python -m event_discovery search "jazz music tonight"
    $ python -m event_discovery search --max-price 200 "yoga"
    $ python -m event_discovery analyze "cheap yoga classes"
"""

import sys
from typing import Optional, Sequence

import click

from .cli.commands import cli
from .initialize import initialize


def main(args: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments.
            Defaults to sys.argv[1:].

    Returns:
        Exit code.
    """
    try:
        # Initialize package
        initialize()

        # Run CLI
        cli(args=args, standalone_mode=False)
        return 0

    except click.exceptions.Exit as e:
        return e.exit_code
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
