__all__ = [
    "Formatter",
    "TypeNode",
    "cli",
    "exceptions",
    "sort_types",
    "types",
]

from . import exceptions
from . import types
from .cli import cli
from .formatter import Formatter
from .types import TypeNode, sort_types
