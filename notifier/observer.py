# notifier/observer.py
from abc import ABC, abstractmethod

from mvc.record import BaggageInfo


class IObserver(ABC):
    @abstractmethod
    def on_record(self, record: BaggageInfo) -> None:
        """Called when the subject adds a record or clears a flight's claim."""
        ...

    @abstractmethod
    def on_complete(self) -> None:
        """Called once when the subject ends the stream; nothing follows."""
        ...

    def on_error(self, error: Exception) -> None:
        # BaggageHandler never sends errors
        pass


class ISubject(ABC):
    @abstractmethod
    def attach(self, observer: IObserver) -> "Unsubscriber": ...
    @abstractmethod
    def detach(self, observer: IObserver) -> None: ...
    @abstractmethod
    def notify(self, record: BaggageInfo) -> None: ...


class Unsubscriber:
    """
    Detach handle returned by ISubject.attach().
    Only the first dispose() detaches; later calls do nothing, so a stale
    handle cannot cut off a newer subscription of the same observer.
    """
    def __init__(self, owner: ISubject, observer: IObserver) -> None:
        self._owner = owner
        self._observer = observer
        self._disposed = False

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._owner.detach(self._observer)
