from .base import ISink


class ConsoleSink(ISink):
    def write_line(self, text: str) -> None:
        print(text)
