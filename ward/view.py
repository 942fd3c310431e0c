# ward/view.py
from absl import logging
from notifier.observer import IObserver


class ConsoleView(IObserver):
    def receive(self, message: str) -> None:
        logging.info("[View] %s", message)
