import io
import typing

import pytest
from click.testing import CliRunner

from rsgen.types import TypeNode


RenderFixture: typing.TypeAlias = typing.Callable[[TypeNode], str]
GenericNamesFixture: typing.TypeAlias = typing.Callable[[TypeNode], str]


class RecordingLogger:
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, text: str) -> None:
        self.messages.append(("info", text))

    def warning(self, text: str) -> None:
        self.messages.append(("warning", text))

    def error(self, text: str) -> None:
        self.messages.append(("error", text))


@pytest.fixture
def render():
    def inner(node: TypeNode) -> str:
        buffer = io.StringIO()
        node.render(buffer)
        return buffer.getvalue()

    return inner


@pytest.fixture
def generic_names():
    def inner(node: TypeNode) -> str:
        return " ".join(generic.name for generic in node.generics)

    return inner


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def runner():
    return CliRunner()
