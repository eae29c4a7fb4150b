import contextlib
import typing

if typing.TYPE_CHECKING:
    from io import TextIOBase
    from rsgen.types import TypeNode


DEFAULT_INDENT = 4


class Formatter:
    """An indenting text sink for generated code.

    Every line written while inside `indent()` (or `block()`) is prefixed with
    the current indentation. Blank lines are left empty.
    """

    def __init__(self, dst: "TextIOBase", indent: int = DEFAULT_INDENT) -> None:
        self.dst = dst
        self.indent_size = indent
        self.spaces = 0
        self._last_char: str | None = None

    def is_start_of_line(self) -> bool:
        return self._last_char is None or self._last_char == "\n"

    def write(self, text: str) -> int:
        should_indent = self.is_start_of_line()
        for i, line in enumerate(text.split("\n")):
            if i != 0:
                self._emit("\n")
                should_indent = True
            if should_indent and line:
                self._emit(" " * self.spaces)
            self._emit(line)
        return len(text)

    def _emit(self, text: str) -> None:
        if not text:
            return
        self.dst.write(text)
        self._last_char = text[-1]

    @contextlib.contextmanager
    def indent(self) -> typing.Iterator[typing.Self]:
        self.spaces += self.indent_size
        try:
            yield self
        finally:
            self.spaces -= self.indent_size

    @contextlib.contextmanager
    def block(self) -> typing.Iterator[typing.Self]:
        if not self.is_start_of_line():
            self.write(" ")
        self.write("{\n")
        with self.indent():
            yield self
        self.write("}\n")


def render_bounds(types: typing.Sequence["TypeNode"], fmt: Formatter) -> None:
    for i, ty in enumerate(types):
        if i != 0:
            fmt.write(" + ")
        ty.render(fmt)
