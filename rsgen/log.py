import typing

import click


class Logger(typing.Protocol):
    def info(self, text: str) -> None: ...
    def warning(self, text: str) -> None: ...
    def error(self, text: str) -> None: ...


class ClickLogger:
    """Reports to stderr so rendered types on stdout stay machine readable.

    With `quiet=True` only errors are shown. Warnings are counted either way.
    """

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self.warnings = 0

    def info(self, text: str) -> None:
        if not self.quiet:
            click.echo(f"Info: {text}", err=True)

    def warning(self, text: str) -> None:
        self.warnings += 1
        if not self.quiet:
            click.secho(f"Warning: {text}", fg="yellow", err=True)

    def error(self, text: str) -> None:
        click.secho(f"Error: {text}", fg="red", err=True)
