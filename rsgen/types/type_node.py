import io
import typing

from .decompose import PATH_SEPARATOR, decompose_type
from ..exceptions import EmbeddedGenericsError, QualifiedPathError, TypeSyntaxError

if typing.TYPE_CHECKING:
    from rsgen.log import Logger


class Writable(typing.Protocol):
    def write(self, text: str, /) -> typing.Any: ...


class TypeNode:
    """A Rust type reference: a (possibly qualified) name and its generics.

    `TypeNode("BTreeMap<Vec<u8>, String>")` parses the expression into a name
    (`BTreeMap`) and a list of generic arguments, each a `TypeNode` itself.
    Syntax that can't be split that way (references, tuples, lifetimes,
    `dyn` bounds, ...) is kept as an opaque name with no generics.

    Passing another `TypeNode` makes a deep copy of it.
    """

    name: str
    generics: list["TypeNode"]

    def __init__(self, name: "str | TypeNode") -> None:
        if isinstance(name, TypeNode):
            self.name = name.name
            self.generics = [TypeNode(generic) for generic in name.generics]
            return

        parsed = TypeNode.parse(str(name))
        self.name = parsed.name
        self.generics = parsed.generics

    @classmethod
    def parse(cls, text: str, logger: "Logger | None" = None) -> "TypeNode":
        """Build a node from `text`, reporting opaque fallbacks to `logger`."""
        if "<" not in text:
            return cls.opaque(text)
        return decompose_type(text, logger)

    @classmethod
    def opaque(cls, name: str) -> "TypeNode":
        """Build a node holding `name` verbatim, without parsing it."""
        if not name:
            raise TypeSyntaxError(name, "a type name can't be empty")

        node = cls.__new__(cls)
        node.name = name
        node.generics = []
        return node

    def generic(self, ty: "TypeNode | str") -> typing.Self:
        """Append a generic argument, returning `self` so calls can be chained."""
        if "<" in self.name:
            raise EmbeddedGenericsError(self.name)

        self.generics.append(TypeNode(ty))
        return self

    def path(self, prefix: str) -> "TypeNode":
        """Return a copy of this type qualified with `prefix`."""
        if PATH_SEPARATOR in self.name:
            raise QualifiedPathError(self.name, prefix)

        node = TypeNode.opaque(f"{prefix}{PATH_SEPARATOR}{self.name}")
        node.generics = [TypeNode(generic) for generic in self.generics]
        return node

    def key_for_sorting(self) -> str:
        return self.name.rpartition(PATH_SEPARATOR)[2]

    def render(self, fmt: Writable) -> None:
        fmt.write(self.name)
        TypeNode.render_generics(self.generics, fmt)

    @staticmethod
    def render_generics(generics: typing.Sequence["TypeNode"], fmt: Writable) -> None:
        if len(generics) == 0:
            return

        fmt.write("<")
        for i, ty in enumerate(generics):
            if i != 0:
                fmt.write(", ")
            ty.render(fmt)
        fmt.write(">")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeNode):
            return NotImplemented
        return self.name == other.name and self.generics == other.generics

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        s = f"<TypeNode {self.name}"
        if len(self.generics):
            s += f" generics={self.generics}"
        return s + ">"


def sort_types(types: typing.Iterable[TypeNode]) -> list[TypeNode]:
    return sorted(types, key=TypeNode.key_for_sorting)
