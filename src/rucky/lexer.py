# src/rucky/lexer.py
import logging

from .rucky_token import (
    ASSIGN, ASTERISK, BANG, COMMA, EOF, EQ, GT, ILLEGAL, INT, INT_MAX,
    LBRACE, LPAREN, LT, MINUS, NOT_EQ, PLUS, RBRACE, RPAREN, SEMICOLON,
    SLASH, STRING, Token, lookup_ident,
)
from .config import config

logger = logging.getLogger(__name__)

_SINGLE_CHAR_TOKENS = {
    "+": PLUS,
    "-": MINUS,
    "*": ASTERISK,
    "/": SLASH,
    "<": LT,
    ">": GT,
    ",": COMMA,
    ";": SEMICOLON,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
}

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}

_WHITESPACE = (" ", "\t", "\n", "\r")


class Lexer:
    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.read_char()

    def __iter__(self):
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == EOF:
                return

    def _log(self, message, line, column, level="normal"):
        """Controlled logging based on config"""
        if config.should_log(level):
            logger.debug(f"{self.filename}:{line}:{column}: {message}")

    def read_char(self):
        # Position tracking refers to the character about to become current
        if self.ch == "\n":
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.column += 1
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()

        line = self.line
        column = self.column

        if self.ch == "":
            # EOF is a fixed point, the cursor never moves past it
            return Token(EOF, "", line, column)

        if self.ch == "=":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(EQ, "==", line, column)
            else:
                tok = Token(ASSIGN, self.ch, line, column)
        elif self.ch == "!":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(NOT_EQ, "!=", line, column)
            else:
                tok = Token(BANG, self.ch, line, column)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        elif self.ch == '"':
            return self.read_string(line, column)
        elif self.is_letter(self.ch):
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, column)
        elif self.is_digit(self.ch):
            return self.read_number(line, column)
        else:
            self._log(f"illegal character {self.ch!r}", line, column)
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch) or self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self, line, column):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        literal = self.input[start_position:self.position]

        value = int(literal)
        if value > INT_MAX:
            self._log(f"integer literal {literal} out of range", line, column)
            return Token(ILLEGAL, literal, line, column)
        return Token(INT, literal, line, column, value=value)

    def read_string(self, line, column):
        start_position = self.position
        result = []
        while True:
            self.read_char()
            if self.ch == "":
                self._log("unterminated string literal", line, column)
                return Token(ILLEGAL, self.input[start_position:], line, column)
            if self.ch == "\\":
                self.read_char()
                if self.ch == "":
                    return Token(ILLEGAL, self.input[start_position:], line, column)
                result.append(_ESCAPES.get(self.ch, self.ch))
            elif self.ch == '"':
                break
            else:
                result.append(self.ch)

        # Step past the closing quote
        self.read_char()
        return Token(STRING, "".join(result), line, column)

    def is_letter(self, char):
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    def is_digit(self, char):
        return "0" <= char <= "9"

    def skip_whitespace(self):
        while self.ch in _WHITESPACE:
            self.read_char()


def tokenize(source_code, filename="<stdin>"):
    """Lex ``source_code`` completely; the last token is always EOF."""
    return list(Lexer(source_code, filename))
