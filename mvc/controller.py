from typing import Iterable

from absl import logging as absl_logging

from mvc.model import BaggageHandler
from mvc.record import BaggageInfo, Row


class BaggageFeedController:
    """
    Controller:
      - takes raw rows: a flight number alone, (flight,) or (flight, origin, carousel)
      - builds BaggageInfo records from them
      - writes each record to the Model, which notifies the monitors
    """
    def __init__(self, model: BaggageHandler) -> None:
        self.model = model
        self.applied = 0

    def apply(self, row: Row) -> BaggageInfo:
        info = BaggageInfo.from_row(row)
        self.model.update(info)
        self.applied += 1
        return info

    def run(self, rows: Iterable[Row]) -> int:
        count = 0
        for row in rows:
            self.apply(row)
            count += 1
        absl_logging.debug("Controller: applied %d rows", count)
        return count

    def finish(self) -> None:
        """Last flight of the day has been claimed."""
        self.model.close_all()
