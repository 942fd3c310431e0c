from typing import List, Tuple
from notifier.observer import IObserver


class Nurse(IObserver):
    """
    Observer that records every notification it receives.
      - name is descriptive only; two nurses with the same name are distinct
      - notifications keep arrival order
    """
    def __init__(self, name: str) -> None:
        self._name = name
        self._notifications: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def notifications(self) -> Tuple[str, ...]:
        return tuple(self._notifications)

    def receive(self, message: str) -> None:
        self._notifications.append(message)

    def __repr__(self) -> str:
        return f"Nurse(name={self._name!r}, notifications={len(self._notifications)})"
