# mvc/view.py
from typing import Dict, List, Optional

from absl import logging as absl_logging

from mvc.record import BaggageInfo
from notifier.errors import InvalidConfigurationError, PreconditionViolationError
from notifier.observer import ISubject, IObserver, Unsubscriber
from payload.adapter import ArrivalsLineAdapter, IPayloadAdapter
from sinks.base import ISink
from sinks.console import ConsoleSink


class ArrivalsMonitor(IObserver):
    """
    Observer that displays arriving flights and their baggage carousels.
      - keeps its own view of formatted lines, rendered in sorted order
      - a zero-location record drops every line of that flight
      - re-renders to the sink only when the view actually changed

    Lines are deduplicated on the formatted text, so the same flight with a
    different origin or carousel shows up as a separate line.
    """
    def __init__(self,
                 name: str,
                 sink: Optional[ISink] = None,
                 adapter: Optional[IPayloadAdapter] = None) -> None:
        if name is None or not str(name).strip():
            raise InvalidConfigurationError("The observer must be assigned a name.")
        self.name = name
        self.sink = sink if sink is not None else ConsoleSink()
        self.adapter = adapter if adapter is not None else ArrivalsLineAdapter()

        # formatted line -> flight number
        self._flight_infos: Dict[str, int] = {}
        self._cancellation: Optional[Unsubscriber] = None

    # ---- Subscription ----
    def attach(self, provider: ISubject) -> None:
        self._cancellation = provider.attach(self)
        absl_logging.debug("%s attached", self.name)

    def detach(self) -> None:
        if self._cancellation is None:
            raise PreconditionViolationError(f"{self.name} was never attached")
        self._cancellation.dispose()
        self._flight_infos.clear()
        absl_logging.debug("%s detached", self.name)

    # ---- Observer API ----
    def on_complete(self) -> None:
        self._flight_infos.clear()

    def on_error(self, error: Exception) -> None:
        absl_logging.error("%s received error: %s", self.name, error)

    def on_record(self, record: BaggageInfo) -> None:
        updated = False

        if not record.is_claim_assigned():
            # Flight has unloaded its baggage; drop all of its lines
            stale = [line for line, flight_no in self._flight_infos.items()
                     if flight_no == record.flight_number]
            for line in stale:
                del self._flight_infos[line]
            updated = bool(stale)
        else:
            line = self.adapter.to_text(record)
            if line not in self._flight_infos:
                self._flight_infos[line] = record.flight_number
                updated = True

        if updated:
            self.render()

    # ---- Rendering ----
    def lines(self) -> List[str]:
        return sorted(self._flight_infos)

    def render(self) -> None:
        self.sink.write_line(f"Arrivals information from {self.name}")
        for line in self.lines():
            self.sink.write_line(line)
        self.sink.write_line("")
