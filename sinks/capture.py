from typing import List

from .base import ISink


class CaptureSink(ISink):
    """Keeps every rendered line in memory, e.g. to compare against expected output."""
    def __init__(self) -> None:
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()
