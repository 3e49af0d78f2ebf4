"""
Lox Scanner - turns source text into tokens

Single forward sweep over an in-memory string with one character of
lookahead (two when deciding whether a '.' belongs to a number).
The first lexical error ends the scan: it is reported, recorded and
raised, and no tokens are returned.

xwest
"""

from typing import List, Optional

from .tokens import (
    Token, TokenType, Literal, PUNCTUATION, ONE_OR_TWO_CHAR, WHITESPACE
)
from .keywords import lookup_keyword
from .errors import (
    LexerError, ScannerDefect, create_unexpected_character_error,
    create_unterminated_string_error
)
from ..diagnostics import Reporter, ConsoleReporter
from ..utils.logger import get_logger

logger = get_logger(__name__)

# One character per byte, ASCII-compatible
SOURCE_ENCODING = "latin-1"


class Scanner:
    """
    Lox lexical analyzer.

    One instance scans one source unit exactly once. Scanners share no
    mutable state, so independent scans may run on separate threads.
    """

    def __init__(self, source: str, reporter: Optional[Reporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete program text
            reporter: Receives formatted diagnostics; prints to stdout if omitted
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self._start_line = 1
        self._scanned = False

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with a single EOF token

        Raises:
            LexerError: On the first unexpected character or unterminated string
            ScannerDefect: If a validated numeric run fails to convert
            RuntimeError: If this scanner has already been used
        """
        if self._scanned:
            raise RuntimeError("Scanner instances scan exactly once")
        self._scanned = True

        while not self._is_at_end():
            self.start = self.current
            self._start_line = self.line
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("Scanned %d tokens over %d lines", len(self.tokens), self.line)
        return self.tokens

    def _scan_token(self):
        """Recognize one lexical unit starting at the cursor."""
        char = self._advance()

        if char in PUNCTUATION:
            self._add_token(PUNCTUATION[char])
        elif char in ONE_OR_TWO_CHAR:
            single, compound = ONE_OR_TWO_CHAR[char]
            self._add_token(compound if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                # Line comment: runs up to, but not including, the newline
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE or char == "\n":
            pass
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            raise self._error(create_unexpected_character_error(self.line))

    def _string(self):
        """Tokenize a string literal. No escape processing."""
        while self._peek() != '"' and not self._is_at_end():
            self._advance()

        if self._is_at_end():
            raise self._error(create_unterminated_string_error(self.line))

        self._advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        """Tokenize a numeric literal; all numbers are floats."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' is left for the next iteration as a DOT token
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        text = self.source[self.start:self.current]
        self._add_token(TokenType.NUMBER, _parse_number(text, self.line))

    def _identifier(self):
        """Tokenize an identifier or reserved word."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(lookup_keyword(text))

    def _add_token(self, token_type: TokenType, literal: Literal = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self._start_line))

    def _error(self, error: LexerError) -> LexerError:
        """Record and report a lexical error; the caller raises it."""
        self.errors.append(error)
        self.reporter.report(str(error))
        logger.debug("Scan stopped at offset %d: %s", self.start, error.diagnostic.message)
        return error

    def _advance(self) -> str:
        """Consume one character, counting newlines."""
        char = self.source[self.current]
        self.current += 1
        if char == "\n":
            self.line += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is the expected one."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def has_errors(self) -> bool:
        """Check if the scan stopped on a lexical error."""
        return len(self.errors) > 0


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


def _parse_number(text: str, line: int) -> float:
    """Convert a digit run (with optional fraction) to a float."""
    try:
        return float(text)
    except ValueError as exc:
        raise ScannerDefect("Numeric literal failed to parse", text, line) from exc


def read_source(filepath: str) -> str:
    """
    Read a source file so that every byte becomes exactly one character.

    Bytes outside ASCII are kept as-is: inside a string literal they are
    copied into the literal, anywhere else they are unexpected characters.
    """
    with open(filepath, "r", encoding=SOURCE_ENCODING, newline="") as f:
        source = f.read()

    logger.debug("Read %d characters from %s", len(source), filepath)
    return source


def scan_source(source: str, reporter: Optional[Reporter] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        reporter: Diagnostic sink, stdout if omitted

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning fails
    """
    return Scanner(source, reporter).scan_tokens()


def scan_file(filepath: str, reporter: Optional[Reporter] = None) -> List[Token]:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning fails
        OSError: If file cannot be read
    """
    return scan_source(read_source(filepath), reporter)
