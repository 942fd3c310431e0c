from typing import List, Optional, Tuple
from absl import logging
from notifier.observer import ISubject, IObserver
from payload.adapter import IMessageAdapter, ConditionChangeAdapter


class Patient(ISubject):
    """Observable patient; notifies attached nurses when its condition changes."""
    def __init__(self, adapter: Optional[IMessageAdapter] = None) -> None:
        self.adapter = adapter or ConditionChangeAdapter()
        self._observers: List[IObserver] = []

    @property
    def observers(self) -> Tuple[IObserver, ...]:
        return tuple(self._observers)

    def attach(self, observer: IObserver) -> None:
        # duplicates allowed: an observer attached twice is notified twice
        self._observers.append(observer)
        logging.debug("[Patient] Attached %r (%d observers)", observer, len(self._observers))

    def detach(self, observer: IObserver) -> None:
        # match by identity, first registration only
        for i, obs in enumerate(self._observers):
            if obs is observer:
                del self._observers[i]
                logging.debug("[Patient] Detached %r (%d observers)", observer, len(self._observers))
                return

    def notify(self, message: str) -> None:
        observers = list(self._observers)
        logging.debug("[Patient] Notifying %d observers: %s", len(observers), message)
        for obs in observers:
            try:
                obs.receive(message)
            except Exception:
                logging.exception("[Patient] Observer %r failed", obs)

    def change_condition(self, new_condition: str) -> str:
        message = self.adapter.to_text(new_condition)
        self.notify(message)
        return message
