from dataclasses import dataclass
from typing import Tuple, Union

Row = Union[int, Tuple[int], Tuple[int, str, int]]


@dataclass(frozen=True)
class BaggageInfo:
    """
    One flight's baggage-claim status.
      - claim_location == 0 means no carousel assigned (all bags collected)
      - equality/hash use all three fields; use same_flight() to match by flight
    """
    flight_number: int
    origin: str = ""
    claim_location: int = 0

    def __post_init__(self):
        if not isinstance(self.flight_number, int) or isinstance(self.flight_number, bool):
            raise ValueError(f"flight_number must be an int, got {self.flight_number!r}")
        if self.origin is None:
            object.__setattr__(self, "origin", "")
        elif not isinstance(self.origin, str):
            raise ValueError(f"origin must be a str, got {self.origin!r}")
        if not isinstance(self.claim_location, int) or isinstance(self.claim_location, bool):
            raise ValueError(f"claim_location must be an int, got {self.claim_location!r}")
        if self.claim_location < 0:
            raise ValueError(
                f"claim_location must not be negative for flight {self.flight_number}"
            )

    def is_claim_assigned(self) -> bool:
        return self.claim_location != 0

    def same_flight(self, other: "BaggageInfo") -> bool:
        return self.flight_number == other.flight_number

    @classmethod
    def from_row(cls, row: Row) -> "BaggageInfo":
        """Build a record from a bare flight number, (flight,) or (flight, origin, claim)."""
        if isinstance(row, int) and not isinstance(row, bool):
            return cls(row)
        row = tuple(row)
        if len(row) == 1:
            return cls(row[0])
        if len(row) == 3:
            return cls(*row)
        raise ValueError(f"row must hold 1 or 3 fields, got {len(row)}: {row!r}")
