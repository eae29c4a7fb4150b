class TypeNodeError(Exception):
    """Base class for errors raised while building or rewriting type nodes."""


class TypeSyntaxError(TypeNodeError, ValueError):
    """Raised when a type expression cannot be parsed at all."""

    def __init__(
        self,
        text: str,
        reason: str,
        line: int | str | None = None,
        column: int | str | None = None,
    ) -> None:
        self.text = text
        self.reason = reason
        self.line = line
        self.column = column
        location = ""
        if isinstance(column, int) and column > 0:
            location = f" at column {column}"
        super().__init__(f"invalid type expression {text!r}{location}: {reason}")


class EmbeddedGenericsError(TypeNodeError):
    """Raised when appending a generic to a name that still embeds `<...>`."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"type name {name!r} already includes generics")


class QualifiedPathError(TypeNodeError):
    """Raised when qualifying a name that already contains a path."""

    def __init__(self, name: str, prefix: str) -> None:
        self.name = name
        self.prefix = prefix
        super().__init__(
            f"can't prefix {prefix!r} to {name!r}, it is already a qualified path"
        )
