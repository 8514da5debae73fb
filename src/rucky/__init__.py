"""Rucky: lexer and Pratt parser for a small expression language."""

from .lexer import Lexer, tokenize
from .parser import Parser, parse_source, check_parser_errors
from .errors import RuckyError, ParserError

__version__ = "0.1.0"

__all__ = [
    "Lexer", "tokenize",
    "Parser", "parse_source", "check_parser_errors",
    "RuckyError", "ParserError",
]
