"""
User-visible failure notification.

The dashboard shows exactly one generic notice per failed page load. The
notice never carries error details; those go to the log.
"""
import sys
from abc import ABC, abstractmethod
from typing import List, TextIO, Optional

FAILURE_MESSAGE = "Failed to load patient data. See logs for details."


class Notifier(ABC):
    """Channel for the single failure notice of a page load."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show message to the user."""


class ConsoleNotifier(Notifier):
    """Writes the notice to a terminal stream (stderr by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def notify(self, message: str) -> None:
        stream = self._stream or sys.stderr
        stream.write(f"❌ {message}\n")
        stream.flush()


class CollectingNotifier(Notifier):
    """Keeps notices so a caller can render them later (e.g. as a failure page)."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
