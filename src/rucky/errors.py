# src/rucky/errors.py
"""Exceptions for callers that treat parser diagnostics as a hard failure.

The lexer and parser never raise these themselves: lexical anomalies are
ILLEGAL tokens and syntax errors are collected in ``Parser.errors``.
"""


class RuckyError(Exception):
    """Base class for Rucky errors."""


class ParserError(RuckyError):
    def __init__(self, errors, filename="<stdin>"):
        self.errors = list(errors)
        self.filename = filename
        super().__init__(self._format())

    def _format(self):
        lines = [f"{self.filename}: parser has {len(self.errors)} error(s)"]
        lines.extend(f"  parser error: {msg}" for msg in self.errors)
        return "\n".join(lines)
