import threading
from typing import Dict, List

from absl import logging as absl_logging

from mvc.record import BaggageInfo
from notifier.observer import ISubject, IObserver, Unsubscriber


class BaggageHandler(ISubject):
    """
    Observable provider of arriving flights and their baggage-claim carousels.
      - active records are kept in insertion order, deduplicated by full value
      - a record with claim_location 0 clears every active record of that flight
      - every change is pushed to all attached observers before the call returns
    """
    def __init__(self):
        # dict used as an ordered set
        self._flights: Dict[BaggageInfo, None] = {}
        self._observers: List[IObserver] = []
        self._lock = threading.RLock()

    # ---- Subject API ----
    def attach(self, observer: IObserver) -> Unsubscriber:
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)
                # catch the newcomer up with the current state
                for info in list(self._flights):
                    observer.on_record(info)
        return Unsubscriber(self, observer)

    def detach(self, observer: IObserver) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def notify(self, record: BaggageInfo) -> None:
        with self._lock:
            for obs in list(self._observers):
                obs.on_record(record)

    # ---- Updates ----
    def update(self, info: BaggageInfo) -> None:
        with self._lock:
            if not info.is_claim_assigned():
                self._clear_flight(info)
            elif info not in self._flights:
                self._flights[info] = None
                absl_logging.debug("flight %d is added!", info.flight_number)
                self.notify(info)

    def update_by_flight_number(self, flight_number: int) -> None:
        """Signal that all baggage of the flight has been picked up."""
        self.update(BaggageInfo(flight_number))

    def _clear_flight(self, info: BaggageInfo) -> None:
        matches = [f for f in self._flights if info.same_flight(f)]
        for _ in matches:
            # observers get the incoming zero-location record, not the stored one
            self.notify(info)
        for flight in matches:
            # a nested update from an observer may have removed it already
            if flight in self._flights:
                del self._flights[flight]
                absl_logging.debug("flight %d is removed!", flight.flight_number)

    def close_all(self) -> None:
        """Last flight of the day has been processed: complete and drop every observer."""
        with self._lock:
            for obs in list(self._observers):
                obs.on_complete()
            self._observers.clear()

    # ---- Read accessors ----
    def flights(self) -> List[BaggageInfo]:
        with self._lock:
            return list(self._flights)

    def observer_count(self) -> int:
        with self._lock:
            return len(self._observers)

    def is_attached(self, observer: IObserver) -> bool:
        with self._lock:
            return observer in self._observers
