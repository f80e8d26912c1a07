# payload/adapter.py
from abc import ABC, abstractmethod

from mvc.record import BaggageInfo

ORIGIN_WIDTH = 20
FLIGHT_WIDTH = 5
CLAIM_WIDTH = 3


def format_line(origin: str, flight_number: int, claim: int) -> str:
    """
    Fixed-width arrivals line:
      origin left-justified to 20, one space,
      flight number right-justified to 5, two spaces,
      claim right-justified to 3.
    Values wider than their column are not truncated.
    """
    return (
        f"{origin:<{ORIGIN_WIDTH}} "
        f"{flight_number:>{FLIGHT_WIDTH}}  "
        f"{claim:>{CLAIM_WIDTH}}"
    )


class IPayloadAdapter(ABC):
    """Converts a BaggageInfo into the text a monitor displays."""
    @abstractmethod
    def to_text(self, record: BaggageInfo) -> str:
        ...


class ArrivalsLineAdapter(IPayloadAdapter):
    def to_text(self, record: BaggageInfo) -> str:
        return format_line(record.origin, record.flight_number, record.claim_location)

