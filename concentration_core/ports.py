from __future__ import annotations

import sys
from collections import deque
from typing import IO, Iterable, List, Optional


class ConsoleIO:
    """Line I/O against the real console (or any pair of text streams)."""

    def __init__(self, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> None:
        self.stdin = stdin
        self.stdout = stdout or sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def read_line(self, prompt: str = "") -> str:
        """Shows the prompt and reads one line. Raises EOFError when input runs out."""
        if self.stdin is None:
            return input(prompt)
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")


class ScriptedIO:
    """In-memory port: feeds queued lines in, records everything written out."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = deque(lines)
        self.output: List[str] = []

    def feed(self, *lines: str) -> None:
        self._lines.extend(lines)

    def write(self, text: str = "") -> None:
        self.output.append(text + "\n")

    def read_line(self, prompt: str = "") -> str:
        self.output.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.popleft()

    @property
    def text(self) -> str:
        return "".join(self.output)
