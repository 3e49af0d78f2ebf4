"""
loxscan

Lexical-analysis front end for the Lox scripting language.

Architecture:
    loxscan/
    ├── lexer/           # Token model, reserved words, scanner engine
    ├── diagnostics.py   # Error reporters
    └── cli.py           # File and REPL driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, LexerError, ScannerDefect, scan_source, scan_file
from .diagnostics import Reporter, ConsoleReporter, CollectingReporter, NullReporter

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "LexerError",
    "ScannerDefect",
    "scan_source",
    "scan_file",

    # Reporting
    "Reporter",
    "ConsoleReporter",
    "CollectingReporter",
    "NullReporter",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
