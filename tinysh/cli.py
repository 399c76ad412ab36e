"""tinysh command-line entry point."""

import logging
import os
import sys

import click

from .config import ShellConfig
from .context import ShellContext
from .exceptions import ConfigError
from .shell import Shell

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("script", type=click.File("r"), required=False)
@click.option("-c", "--command", "command_line", help="Run a single command line and exit.")
@click.option("--prompt", help="Interactive prompt (overrides $TINYSH_PROMPT).")
@click.option("--max-arg-len", type=click.IntRange(min=2),
              help="Argument capacity (overrides $TINYSH_MAX_ARG_LEN).")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Logging level (overrides $TINYSH_LOG_LEVEL).")
def cli(script, command_line, prompt, max_arg_len, log_level):
    """tinysh - a minimal command shell.

    Reads commands from SCRIPT, from -c, or from standard input.
    """
    try:
        config = ShellConfig.from_env(os.environ)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    if prompt is not None:
        config.prompt = prompt
    if max_arg_len is not None:
        config.max_arg_len = max_arg_len
    if log_level is not None:
        config.log_level = log_level.upper()
    configure_logging(config.log_level)

    shell = Shell(ShellContext(config=config))
    if command_line is not None:
        status = shell.run_line(command_line)
    elif script is not None:
        status = shell.run(script)
    else:
        stdin = click.get_text_stream("stdin")
        status = shell.run(stdin, interactive=stdin.isatty())
    sys.exit(status)


def main():
    """Entry point for the tinysh console script."""
    cli()


if __name__ == "__main__":
    main()
