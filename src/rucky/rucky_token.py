# src/rucky/rucky_token.py

ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENT"
INT = "INT"
STRING = "STRING"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
BANG = "!"
ASTERISK = "*"
SLASH = "/"

LT = "<"
GT = ">"
EQ = "=="
NOT_EQ = "!="

# Delimiters
COMMA = ","
SEMICOLON = ";"

LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

KEYWORDS = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}

# Largest integer literal (signed 64-bit)
INT_MAX = 2 ** 63 - 1


def lookup_ident(ident):
    return KEYWORDS.get(ident, IDENT)


class Token:
    """One lexical unit.

    ``literal`` is the source text of the token (the decoded contents for
    strings). Integer tokens also carry ``value`` as a Python int. Position
    is informational and does not take part in equality.
    """

    __slots__ = ("type", "literal", "value", "line", "column")

    def __init__(self, type, literal, line=None, column=None, value=None):
        self.type = type
        self.literal = literal
        self.value = value
        self.line = line
        self.column = column

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.literal == other.literal

    def __hash__(self):
        return hash((self.type, self.literal))

    def __repr__(self):
        if self.type == INT:
            return f"Token({self.type}, {self.value})"
        if self.type in (IDENT, STRING, ILLEGAL):
            return f"Token({self.type}, {self.literal!r})"
        return f"Token({self.type})"
