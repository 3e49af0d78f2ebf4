"""
Error handling for the Lox lexer.

Lexical errors carry the line they were found on, an optional location
label and a message. Their text form is the one the diagnostic reporter
prints: ``[line N] Error <where>: <message>``.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical problem, ready to be reported."""
    line: int
    message: str
    where: str = ""                 # location label, currently always empty
    code: Optional[str] = None

    def format(self) -> str:
        return f"[line {self.line}] Error {self.where}: {self.message}"

    def __str__(self) -> str:
        return self.format()


class LexerError(Exception):
    """
    Exception raised when the scanner meets source text it cannot classify.

    The first one raised ends the scan; no tokens are returned.
    """

    def __init__(
        self,
        message: str,
        line: int,
        where: str = "",
        code: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            line=line,
            message=message,
            where=where,
            code=code
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ScannerDefect(RuntimeError):
    """
    Internal invariant violation inside the scanner.

    Raised when text the scanner already validated fails to convert,
    e.g. a digit-only run that float() rejects. Not a LexerError:
    callers should treat it as a bug, not as bad user input.
    """

    def __init__(self, message: str, lexeme: str, line: int):
        super().__init__(f"{message}: {lexeme!r} (line {line})")
        self.lexeme = lexeme
        self.line = line


UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string"


# Helper functions for creating common errors
def create_unexpected_character_error(line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    return LexerError(UNEXPECTED_CHARACTER, line, code="L001")


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that runs into end of input."""
    return LexerError(UNTERMINATED_STRING, line, code="L002")
