import io
import typing

import click
from prettytable import PrettyTable

from . import argument_types
from .exceptions import TypeNodeError, TypeSyntaxError
from .formatter import Formatter
from .log import ClickLogger
from .types import TypeNode, sort_types


cli = click.Group("rsgen", help="Parse and render Rust type expressions.")


def walk(node: TypeNode, depth: int = 0) -> typing.Iterator[tuple[int, TypeNode]]:
    yield depth, node
    for generic in node.generics:
        yield from walk(generic, depth + 1)


@cli.command(help="Render a type, optionally adding generics and a path prefix.")
@click.argument("type_", metavar="TYPE", type=argument_types.TYPE_NODE)
@click.option(
    "--generic",
    "-g",
    help="A generic argument to append to TYPE. May be used multiple times.",
    type=argument_types.TYPE_NODE,
    multiple=True,
)
@click.option(
    "--path",
    "-p",
    help="A path to qualify TYPE with (e.g. 'std::collections').",
    type=argument_types.PATH_PREFIX,
    default=None,
)
@click.option(
    "--indent",
    help="Number of spaces to indent the output with (defaults to 0).",
    type=click.IntRange(min=0),
    default=0,
)
def render(
    type_: TypeNode,
    generic: tuple[TypeNode, ...],
    path: str | None,
    indent: int,
):
    logger = ClickLogger()
    try:
        for argument in generic:
            type_.generic(argument)
        if path is not None:
            type_ = type_.path(path)
    except TypeNodeError as e:
        logger.error(str(e))
        raise SystemExit(1) from e

    buffer = io.StringIO()
    fmt = Formatter(buffer, indent=indent)
    with fmt.indent():
        type_.render(fmt)
    click.echo(buffer.getvalue())


@cli.command(help="Show how a type is split into names and generic arguments.")
@click.argument("text", metavar="TYPE")
@click.option(
    "--quiet",
    "-q",
    help="Don't print a warning for each part that can't be decomposed.",
    is_flag=True,
)
def inspect(text: str, quiet: bool):
    logger = ClickLogger(quiet=quiet)
    try:
        type_ = TypeNode.parse(text, logger)
    except TypeSyntaxError as e:
        raise click.BadParameter(str(e), param_hint="'TYPE'") from e

    table = PrettyTable()
    table.field_names = ["Depth", "Name", "Sort key", "Generics"]
    table.add_rows(
        [
            [depth, "  " * depth + node.name, node.key_for_sorting(), len(node.generics)]
            for depth, node in walk(type_)
        ]
    )
    table.align["Name"] = "l"
    table.align["Sort key"] = "l"
    table.align["Generics"] = "r"
    click.echo(table.get_string())

    if logger.warnings:
        logger.info(f"{logger.warnings} warning(s) while decomposing '{text}'")


@cli.command(name="sort", help="Print types ordered by their unqualified name.")
@click.argument("types", metavar="TYPE...", type=argument_types.TYPE_NODE, nargs=-1)
def sort_command(types: tuple[TypeNode, ...]):
    for ty in sort_types(types):
        click.echo(str(ty))
