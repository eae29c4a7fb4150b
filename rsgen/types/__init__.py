__all__ = [
    "PATH_SEPARATOR",
    "TypeDecomposer",
    "TypeNode",
    "parse_type",
    "render_tokens",
    "sort_types",
]

from .decompose import PATH_SEPARATOR, TypeDecomposer, render_tokens
from .grammar import parse_type
from .type_node import TypeNode, sort_types
