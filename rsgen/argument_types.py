import typing

from click import ParamType

from .exceptions import TypeSyntaxError
from .types import TypeNode

if typing.TYPE_CHECKING:
    from .log import Logger


class TypeNodeParamType(ParamType):
    name = "type"

    def __init__(self, logger: "Logger | None" = None) -> None:
        self.logger = logger

    def convert(self, value, param, ctx) -> TypeNode:
        if isinstance(value, TypeNode):
            return value

        if not isinstance(value, str):
            self.fail(f"{value!r} is not a valid value", param, ctx)

        try:
            return TypeNode.parse(value, self.logger)
        except TypeSyntaxError as e:
            self.fail(str(e), param, ctx)


class PathPrefixParamType(ParamType):
    name = "path"

    def convert(self, value, param, ctx) -> str:
        if not isinstance(value, str):
            self.fail(f"{value!r} is not a valid value", param, ctx)

        segments = value.split("::")
        if not all(segment.isidentifier() for segment in segments):
            self.fail(
                f"must be identifiers joined by '::' (was {value!r})", param, ctx
            )

        return value


TYPE_NODE = TypeNodeParamType()
PATH_PREFIX = PathPrefixParamType()
