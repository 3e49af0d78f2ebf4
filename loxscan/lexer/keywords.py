"""
Reserved word table for the Lox lexer.

Built once at import time and never mutated, so scanners running on
different threads can share it without locking.

Author: xwest
"""

from types import MappingProxyType
from typing import Mapping

from .tokens import TokenType


KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})


def lookup_keyword(text: str) -> TokenType:
    """
    Classify a complete identifier-shaped run.

    Matching is whole-word only: "and" is AND, "android" is IDENTIFIER.
    """
    return KEYWORDS.get(text, TokenType.IDENTIFIER)


def is_reserved(text: str) -> bool:
    """Check if a spelling is a reserved word."""
    return text in KEYWORDS
