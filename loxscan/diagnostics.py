"""
Diagnostic reporters.

The scanner hands every formatted lexical error to a reporter the moment
it is detected. Reporters only deliver text; they never decide whether
the scan continues.

Author: xwest
"""

import sys
from typing import List, Optional, TextIO


class Reporter:
    """Base class for diagnostic sinks."""

    def report(self, message: str) -> None:
        raise NotImplementedError


class ConsoleReporter(Reporter):
    """Prints each diagnostic on its own line."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def report(self, message: str) -> None:
        # Resolved at call time so redirected stdout is honored
        print(message, file=self._stream or sys.stdout)


class CollectingReporter(Reporter):
    """Keeps diagnostics in memory, in the order they were reported."""

    def __init__(self):
        self.messages: List[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)

    def has_reports(self) -> bool:
        return len(self.messages) > 0


class NullReporter(Reporter):
    """Discards diagnostics."""

    def report(self, message: str) -> None:
        pass
