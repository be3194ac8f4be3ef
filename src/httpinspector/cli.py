"""
HTTP Inspector command-line entry point.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import click

from httpinspector import __version__
from httpinspector.config import get_config
from httpinspector.http.cli import REQUEST_COMMANDS
from httpinspector.logging_config import configure_logging


@click.group()
@click.version_option(__version__, prog_name="httpinspector")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also log to this file")
@click.option("-t", "--timeout", type=float, default=None,
              help="Request timeout in seconds (default: wait indefinitely)")
@click.option("-k", "--insecure", is_flag=True, help="Disable SSL verification")
@click.pass_context
def main(ctx, debug: bool, log_file: str | None, timeout: float | None, insecure: bool):
    """HTTP request inspector with authentication, query params, and file export."""
    config = get_config()
    try:
        configure_logging(debug=debug, log_file=log_file or config.log_file,
                          level=config.log_level)
    except OSError as e:
        raise click.BadParameter(f"cannot open log file: {e}",
                                 param_hint="--log-file") from e

    ctx.obj = {
        "timeout": timeout if timeout is not None else config.timeout,
        "verify_ssl": config.verify_ssl and not insecure,
        "default_format": config.default_format,
    }


for command in REQUEST_COMMANDS:
    main.add_command(command)


if __name__ == "__main__":
    main()
