from abc import ABC, abstractmethod


class ISink(ABC):
    @abstractmethod
    def write_line(self, text: str) -> None:
        """Emit one rendered line (without trailing newline)."""
