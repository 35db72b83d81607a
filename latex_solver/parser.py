"""
Precedence-climbing recursive descent parser.

Grammar, lowest to highest precedence::

    expression     := additive
    additive       := multiplicative (('+' | '-') multiplicative)*
    multiplicative := power (('*' | '/') power)*
    power          := unary ('^' unary)*
    unary          := ('-' | '+') unary | primary
    primary        := NUMBER | IDENTIFIER | FUNCTION '{' expression '}'
                    | '(' expression ')' | '{' expression '}'

All binary levels are left-associative. Unary minus becomes ``0 - operand``.
"""

from typing import Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .errors import ParseError, ParseErrorKind
from .expr import (
    BinaryOp, BinaryOperator, Equation, Expression, Function, Neg, Number,
    Symbol, tree_depth,
)
from .lexer import Lexer, Token, TokenType


ADDITIVE_OPS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
}

MULTIPLICATIVE_OPS = {
    TokenType.MUL: BinaryOperator.MUL,
    TokenType.DIV: BinaryOperator.DIV,
}


class Parser:
    """Parse one input string into an expression or an equation."""

    def __init__(self, text: str, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.lexer = Lexer(text, self.config)
        self.current: Token = self.lexer.next_token()
        self._nesting = 0

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def advance(self):
        self.current = self.lexer.next_token()

    def _error(self, kind: ParseErrorKind, expected: str) -> ParseError:
        token = self.current
        return ParseError(kind, expected, token.type, token.lexeme,
                          token.position, max(token.end, token.position + 1))

    def expect(self, type_: TokenType, expected: str) -> Token:
        if self.current.type != type_:
            raise self._error(ParseErrorKind.UNEXPECTED_TOKEN, expected)
        token = self.current
        self.advance()
        return token

    def _enter(self):
        self._nesting += 1
        if self._nesting > self.config.max_nesting:
            raise self._error(ParseErrorKind.NESTING_TOO_DEEP,
                              f"{self.config.max_nesting} levels")

    def _leave(self):
        self._nesting -= 1

    def _check_depth(self, expr: Expression) -> Expression:
        if tree_depth(expr) > self.config.max_tree_depth:
            raise ParseError(ParseErrorKind.NESTING_TOO_DEEP,
                             f"a tree depth of {self.config.max_tree_depth}")
        return expr

    # ------------------------------------------------------------------
    # entry points
    # ------------------------------------------------------------------

    def parse(self) -> Expression:
        expr = self.expression()
        if self.current.type != TokenType.END:
            raise self._error(ParseErrorKind.TRAILING_INPUT, "expression")
        return self._check_depth(expr)

    def parse_equation(self) -> Equation:
        left = self.expression()
        if self.current.type != TokenType.EQUAL:
            raise self._error(ParseErrorKind.MISSING_EQUALS, "'='")
        self.advance()
        right = self.expression()
        if self.current.type == TokenType.EQUAL:
            raise self._error(ParseErrorKind.DUPLICATE_EQUALS, "end of input")
        if self.current.type != TokenType.END:
            raise self._error(ParseErrorKind.TRAILING_INPUT, "equation")
        return Equation(self._check_depth(left), self._check_depth(right))

    # ------------------------------------------------------------------
    # grammar
    # ------------------------------------------------------------------

    def expression(self) -> Expression:
        return self.additive()

    def additive(self) -> Expression:
        node = self.multiplicative()
        while self.current.type in ADDITIVE_OPS:
            op = ADDITIVE_OPS[self.current.type]
            self.advance()
            node = BinaryOp(node, self.multiplicative(), op)
        return node

    def multiplicative(self) -> Expression:
        node = self.power()
        while self.current.type in MULTIPLICATIVE_OPS:
            op = MULTIPLICATIVE_OPS[self.current.type]
            self.advance()
            node = BinaryOp(node, self.power(), op)
        return node

    def power(self) -> Expression:
        node = self.unary()
        while self.current.type == TokenType.POW:
            self.advance()
            node = BinaryOp(node, self.unary(), BinaryOperator.POW)
        return node

    def unary(self) -> Expression:
        if self.current.type == TokenType.MINUS:
            self._enter()
            self.advance()
            node = Neg(self.unary())
            self._leave()
            return node
        if self.current.type == TokenType.PLUS:
            self._enter()
            self.advance()
            node = self.unary()
            self._leave()
            return node
        return self.primary()

    def primary(self) -> Expression:
        token = self.current

        if token.type == TokenType.NUMBER:
            self.advance()
            return Number(token.value)

        if token.type == TokenType.IDENTIFIER:
            self.advance()
            return Symbol(token.lexeme)

        if token.type == TokenType.FUNCTION:
            self._enter()
            self.advance()
            self.expect(TokenType.LBRACE, f"'{{' after function name \\{token.lexeme}")
            argument = self.expression()
            self.expect(TokenType.RBRACE, "'}' after function argument")
            self._leave()
            return Function(token.lexeme, argument)

        if token.type == TokenType.LPAREN:
            self._enter()
            self.advance()
            node = self.expression()
            self.expect(TokenType.RPAREN, "')'")
            self._leave()
            return node

        if token.type == TokenType.LBRACE:
            self._enter()
            self.advance()
            node = self.expression()
            self.expect(TokenType.RBRACE, "'}'")
            self._leave()
            return node

        raise self._error(ParseErrorKind.UNEXPECTED_TOKEN, "number, variable, function or '('")


def parse(text: str, config: Optional[EngineConfig] = None) -> Expression:
    """Parse a single expression; the whole input must be consumed."""
    return Parser(text, config).parse()


def parse_equation(text: str, config: Optional[EngineConfig] = None) -> Equation:
    """Parse ``<expr> = <expr>``; the whole input must be consumed."""
    return Parser(text, config).parse_equation()
