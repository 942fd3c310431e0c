# payload/adapter.py
from abc import ABC, abstractmethod


class IMessageAdapter(ABC):
    """Converts a patient condition into the notification text sent to observers."""
    @abstractmethod
    def to_text(self, condition: str) -> str:
        ...


class ConditionChangeAdapter(IMessageAdapter):
    """
    Builds the message nurses expect:
      "The patient's condition changed to: <condition>"
    The condition is inserted verbatim.
    """
    PREFIX = "The patient's condition changed to: "

    def to_text(self, condition: str) -> str:
        return f"{self.PREFIX}{condition}"
