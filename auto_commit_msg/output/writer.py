"""Output sinks for the finished commit message."""

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO


class OutputWriter(ABC):
    """Destination for the rendered message. Written exactly once per run."""

    @abstractmethod
    def write(self, text: str) -> None:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass


class FileWriter(OutputWriter):
    """Creates or truncates the file, then writes everything in one call."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    def write(self, text: str) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(text)


class StdoutWriter(OutputWriter):

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def name(self) -> str:
        return "stdout"

    def write(self, text: str) -> None:
        # sys.stdout may be replaced after construction
        stream = self._stream or sys.stdout
        stream.write(text)
        stream.flush()


def get_writer(path: Path | str | None) -> OutputWriter:
    """File when a path is given, stdout otherwise."""
    if path:
        return FileWriter(path)
    return StdoutWriter()
