# notifier/observer.py
from abc import ABC, abstractmethod


class IObserver(ABC):
    @abstractmethod
    def receive(self, message: str) -> None:
        """Called when the subject (Patient) has a new notification."""
        ...


class ISubject(ABC):
    @abstractmethod
    def attach(self, observer: IObserver) -> None: ...
    @abstractmethod
    def detach(self, observer: IObserver) -> None: ...
    @abstractmethod
    def notify(self, message: str) -> None: ...
