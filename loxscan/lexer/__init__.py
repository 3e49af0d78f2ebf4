"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.
Converts raw source text into an ordered list of tokens for the parser.

Key Features:
- ASCII identifiers with whole-word reserved word recognition
- String literals (multi-line, no escape processing)
- Numeric literals (all numbers are floats)
- Line comments
- Line tracking for diagnostics
- Stop-on-first-error reporting

Author: xwest
"""

from .tokens import Token, TokenType, Literal
from .keywords import KEYWORDS, lookup_keyword
from .scanner import Scanner, scan_source, scan_file
from .errors import Diagnostic, LexerError, ScannerDefect

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "Literal",
    "KEYWORDS",
    "lookup_keyword",
    "scan_source",
    "scan_file",
    "Diagnostic",
    "LexerError",
    "ScannerDefect",
]
