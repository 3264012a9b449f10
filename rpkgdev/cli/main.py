# rpkgdev/cli/main.py
"""Main CLI entry point for rpkgdev"""

import logging
import sys

import click
from rich.logging import RichHandler

from .commands import deploy, inspect, templates
from .utils.output import console
from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object"""

    def __init__(self, verbose: bool = False, debug: bool = False, quiet: bool = False):
        self.verbose = verbose
        self.debug = debug
        self.quiet = quiet


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.pass_context
def cli(ctx, verbose, debug, quiet):
    """rpkgdev - R package development helpers

    Scaffolds new R packages from a bundled template with development
    scripts, AI agent configuration, GitHub workflows and testthat
    infrastructure.
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        logging.disable(logging.NOTSET)
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(verbose=verbose, debug=debug, quiet=quiet)


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(templates.templates)
cli.add_command(inspect.inspect)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
