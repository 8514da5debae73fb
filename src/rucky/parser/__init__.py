# src/rucky/parser/__init__.py
"""
Parser module for the Rucky language.
"""

from .parser import (
    Parser, parse_source, check_parser_errors, precedences,
    LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL,
)

__all__ = [
    "Parser", "parse_source", "check_parser_errors", "precedences",
    "LOWEST", "EQUALS", "LESSGREATER", "SUM", "PRODUCT", "PREFIX", "CALL",
]
