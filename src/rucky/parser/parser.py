# src/rucky/parser/parser.py
import logging

from ..rucky_token import (
    ASSIGN, ASTERISK, BANG, EOF, EQ, GT, IDENT, ILLEGAL, INT, LET, LPAREN,
    LT, MINUS, NOT_EQ, PLUS, RETURN, RPAREN, SEMICOLON, SLASH, STRING,
)
from ..lexer import Lexer
from ..rucky_ast import (
    BlankStatement, ExpressionStatement, Identifier, InfixExpression,
    IntegerLiteral, LetStatement, PrefixExpression, Program, ReturnStatement,
    StringLiteral,
)
from ..errors import ParserError
from ..config import config

logger = logging.getLogger(__name__)

# Precedence constants
LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL = 1, 2, 3, 4, 5, 6, 7

precedences = {
    EQ: EQUALS, NOT_EQ: EQUALS,
    LT: LESSGREATER, GT: LESSGREATER,
    PLUS: SUM, MINUS: SUM,
    SLASH: PRODUCT, ASTERISK: PRODUCT,
}


class Parser:
    def __init__(self, lexer):
        self.lexer = lexer
        self.errors = []
        self.cur_token = None
        self.peek_token = None

        self.prefix_parse_fns = {
            IDENT: self.parse_identifier,
            INT: self.parse_integer_literal,
            STRING: self.parse_string_literal,
            BANG: self.parse_prefix_expression,
            PLUS: self.parse_prefix_expression,
            MINUS: self.parse_prefix_expression,
            LPAREN: self.parse_grouped_expression,
            ILLEGAL: self.parse_illegal,
        }
        self.infix_parse_fns = {
            PLUS: self.parse_infix_expression,
            MINUS: self.parse_infix_expression,
            SLASH: self.parse_infix_expression,
            ASTERISK: self.parse_infix_expression,
            EQ: self.parse_infix_expression,
            NOT_EQ: self.parse_infix_expression,
            LT: self.parse_infix_expression,
            GT: self.parse_infix_expression,
        }
        self.next_token()
        self.next_token()

    def _log(self, message, level="normal"):
        """Controlled logging based on config"""
        if config.should_log(level):
            logger.debug(message)

    def parse_program(self):
        program = Program()
        while not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()

        self._log(f"Parsed {len(program.statements)} statements, {len(self.errors)} errors", "minimal")
        return program

    def parse_statement(self):
        start = self.cur_token
        try:
            if self.cur_token_is(LET):
                return self.parse_let_statement()
            elif self.cur_token_is(RETURN):
                return self.parse_return_statement()
            elif self.cur_token_is(SEMICOLON):
                return BlankStatement()
            else:
                return self.parse_expression_statement()
        except RecursionError:
            # Nesting deeper than the interpreter stack allows
            self.error(start, "expression nested too deeply")
            self.recover_to_next_statement()
            return None

    def parse_let_statement(self):
        if not self.expect_peek(IDENT, "expected identifier after 'let'"):
            self.recover_to_next_statement()
            return None

        name = Identifier(value=self.cur_token.literal)

        if not self.expect_peek(ASSIGN, f"expected '=' after '{name.value}'"):
            self.recover_to_next_statement()
            return None

        self.next_token()
        value = self.parse_expression(LOWEST)
        if value is None:
            self.recover_to_next_statement()
            return None

        self.skip_to_semicolon()
        self._log(f"let {name.value}", "verbose")
        return LetStatement(name=name, value=value)

    def parse_return_statement(self):
        self.next_token()
        return_value = self.parse_expression(LOWEST)
        if return_value is None:
            self.recover_to_next_statement()
            return None

        self.skip_to_semicolon()
        return ReturnStatement(return_value=return_value)

    def parse_expression_statement(self):
        expression = self.parse_expression(LOWEST)
        if expression is None:
            self.recover_to_next_statement()
            return None

        # Semicolon is optional
        if self.peek_token_is(SEMICOLON):
            self.next_token()
        return ExpressionStatement(expression=expression)

    def skip_to_semicolon(self):
        while not self.cur_token_is(SEMICOLON) and not self.cur_token_is(EOF):
            self.next_token()

    def recover_to_next_statement(self):
        """Discard the rest of a malformed statement."""
        skipped = self.cur_token
        self.skip_to_semicolon()
        self._log(f"Recovered from line {skipped.line}:{skipped.column} to {self.cur_token.type}", "verbose")

    def parse_expression(self, precedence):
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token)
            return None

        left_exp = prefix()
        if left_exp is None:
            return None

        while not self.peek_token_is(SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left_exp

            self.next_token()
            left_exp = infix(left_exp)
            if left_exp is None:
                return None

        return left_exp

    def parse_identifier(self):
        return Identifier(value=self.cur_token.literal)

    def parse_integer_literal(self):
        return IntegerLiteral(value=self.cur_token.value)

    def parse_string_literal(self):
        return StringLiteral(value=self.cur_token.literal)

    def parse_illegal(self):
        tok = self.cur_token
        if tok.literal and all(self.lexer.is_digit(ch) for ch in tok.literal):
            self.error(tok, f"Could not parse {tok.literal} as a 64-bit integer")
        elif tok.literal.startswith('"'):
            self.error(tok, "Unterminated string literal")
        else:
            self.error(tok, f"Illegal token '{tok.literal}'")
        return None

    def parse_prefix_expression(self):
        operator = self.cur_token.type
        self.next_token()
        right = self.parse_expression(PREFIX)
        if right is None:
            return None
        return PrefixExpression(operator=operator, right=right)

    def parse_infix_expression(self, left):
        operator = self.cur_token.type
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(left=left, operator=operator, right=right)

    def parse_grouped_expression(self):
        self.next_token()
        exp = self.parse_expression(LOWEST)
        if exp is None:
            return None
        if not self.expect_peek(RPAREN):
            return None
        return exp

    # === TOKEN UTILITIES ===
    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, t):
        return self.cur_token.type == t

    def peek_token_is(self, t):
        return self.peek_token.type == t

    def expect_peek(self, t, message=None):
        if self.peek_token_is(t):
            self.next_token()
            return True
        self.peek_error(t, message)
        return False

    def peek_precedence(self):
        return precedences.get(self.peek_token.type, LOWEST)

    def cur_precedence(self):
        return precedences.get(self.cur_token.type, LOWEST)

    # === DIAGNOSTICS ===
    def error(self, tok, message):
        msg = f"Line {tok.line}:{tok.column} - {message}"
        self.errors.append(msg)
        self._log(msg, "normal")

    def peek_error(self, t, message=None):
        if message is None:
            message = f"expected next token to be {t}, got {self.peek_token.type} instead"
        else:
            message = f"{message}, got {self.peek_token.type} instead"
        self.error(self.peek_token, message)

    def no_prefix_parse_fn_error(self, tok):
        if tok.type == EOF:
            self.error(tok, "unexpected end of input")
        else:
            self.error(tok, f"no prefix parse function for {tok.type} found")


def parse_source(source_code, filename="<stdin>"):
    """Parse ``source_code`` and return ``(program, errors)``."""
    parser = Parser(Lexer(source_code, filename))
    program = parser.parse_program()
    return program, parser.errors


def check_parser_errors(parser):
    """Raise ParserError if ``parser`` recorded any diagnostics."""
    if not parser.errors:
        return
    raise ParserError(parser.errors, parser.lexer.filename)
