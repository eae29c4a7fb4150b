import typing

from lark import Token, Tree

from .grammar import parse_type

if typing.TYPE_CHECKING:
    from rsgen.log import Logger
    from .type_node import TypeNode


PATH_SEPARATOR = "::"

_OPENERS = ("(", "[")
_CLOSERS = (")", "]")


def _hugs(previous: str, current: str) -> bool:
    if previous in _OPENERS or current in _CLOSERS:
        return True
    return previous == "{" and current == "}"


def render_tokens(tree: Tree | Token) -> str:
    """Re-render a parsed expression in canonical token form.

    Tokens are separated by a single space, except that brackets and
    parentheses hug their contents: `&'a mut Foo<Bar>` becomes
    `& 'a mut Foo < Bar >` and `(u8, u16)` becomes `(u8 , u16)`.
    """
    if isinstance(tree, Token):
        return str(tree)

    parts: list[str] = []
    previous: str | None = None
    for token in tree.scan_values(lambda v: isinstance(v, Token)):
        value = str(token)
        if previous is not None and not _hugs(previous, value):
            parts.append(" ")
        parts.append(value)
        previous = value
    return "".join(parts)


def _subtrees(tree: Tree) -> list[Tree]:
    return [child for child in tree.children if isinstance(child, Tree)]


class TypeDecomposer:
    """Turns a parsed type expression into a `TypeNode` tree.

    Named paths are split into a name and their positional type arguments.
    Anything that can't be expressed that way becomes an opaque node whose
    name is the canonical rendering of the whole expression.
    """

    def __init__(self, logger: "Logger | None" = None) -> None:
        self.logger = logger

    def decompose(self, tree: Tree | Token) -> "TypeNode":
        if isinstance(tree, Tree) and tree.data == "path_type":
            return self._decompose_path(tree)
        return self._opaque(tree, "it is not a named path")

    def _opaque(self, tree: Tree | Token, reason: str) -> "TypeNode":
        from .type_node import TypeNode  # noqa: PLC0415

        rendered = render_tokens(tree)
        if self.logger is not None:
            self.logger.warning(
                f"can't decompose '{rendered}' ({reason}), keeping it as an opaque name"
            )
        return TypeNode.opaque(rendered)

    def _decompose_path(self, tree: Tree) -> "TypeNode":
        from .type_node import TypeNode  # noqa: PLC0415

        segments = _subtrees(tree)
        names: list[str] = []
        for segment in segments[:-1]:
            if _subtrees(segment):
                return self._opaque(tree, "generics on a non-final path segment")
            names.append(str(segment.children[0]))

        last = segments[-1]
        names.append(str(last.children[0]))
        node = TypeNode(PATH_SEPARATOR.join(names))

        arguments = _subtrees(last)
        if not arguments:
            return node

        (argument_list,) = arguments
        if argument_list.data == "paren_args":
            # Fn(u8) -> u8 keeps only its name, like any path without `<...>`
            if self.logger is not None:
                self.logger.warning(
                    f"dropping the parenthesized arguments of '{render_tokens(tree)}'"
                )
            return node

        for argument in _subtrees(argument_list):
            if argument.data != "type_arg":
                return self._opaque(tree, f"unsupported generic argument ({argument.data})")
            node.generic(self.decompose(argument.children[0]))

        return node


def decompose_type(text: str, logger: "Logger | None" = None) -> "TypeNode":
    return TypeDecomposer(logger).decompose(parse_type(text))
