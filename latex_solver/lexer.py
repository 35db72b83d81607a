"""
LaTeX-flavoured arithmetic lexer.

Produces tokens lazily: ``next_token()`` returns one token at a time and keeps
returning END once the input is exhausted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .errors import LexErrorKind, LexerError


class TokenType(Enum):
    """All lexical token kinds."""
    END = 0
    NUMBER = 1
    IDENTIFIER = 2
    FUNCTION = 3
    PLUS = 4
    MINUS = 5
    MUL = 6
    DIV = 7
    POW = 8
    EQUAL = 9
    LPAREN = 10
    RPAREN = 11
    LBRACE = 12
    RBRACE = 13


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str = ""
    value: float = 0.0  # only meaningful for NUMBER
    position: int = 0
    end: int = 0

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token({self.type.name}, {self.value})"
        if self.lexeme:
            return f"Token({self.type.name}, {self.lexeme!r})"
        return f"Token({self.type.name})"


SINGLE_CHAR_TOKENS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MUL,
    '/': TokenType.DIV,
    '^': TokenType.POW,
    '=': TokenType.EQUAL,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
}

COMMAND_OPERATORS = {
    'times': TokenType.MUL,
    'div': TokenType.DIV,
}


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == '_')


class Lexer:
    def __init__(self, text: str, config: Optional[EngineConfig] = None):
        self.text = text
        self.config = config or DEFAULT_CONFIG
        self.pos = 0

    @property
    def source(self) -> str:
        return self.text

    @property
    def current(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ''

    def advance(self):
        self.pos += 1

    def skip_whitespace(self):
        while self.current and self.current.isspace():
            self.advance()

    def _word(self) -> str:
        start = self.pos
        while self.current and _is_word_char(self.current):
            self.advance()
        return self.text[start:self.pos]

    def number(self) -> Token:
        start = self.pos
        has_dot = False
        while _is_digit(self.current) or (self.current == '.' and not has_dot):
            if self.current == '.':
                has_dot = True
            self.advance()

        literal = self.text[start:self.pos]
        if not literal or literal == '.':
            raise LexerError(LexErrorKind.INVALID_NUMBER, start, self.pos)
        return Token(TokenType.NUMBER, literal, float(literal), start, self.pos)

    def command(self) -> Token:
        start = self.pos
        self.advance()  # backslash
        name = self._word()

        if name in COMMAND_OPERATORS:
            return Token(COMMAND_OPERATORS[name], '\\' + name, 0.0, start, self.pos)
        if name in self.config.function_names:
            return Token(TokenType.FUNCTION, name, 0.0, start, self.pos)
        raise LexerError(LexErrorKind.UNKNOWN_COMMAND, start, self.pos, name)

    def identifier(self) -> Token:
        start = self.pos
        name = self._word()
        return Token(TokenType.IDENTIFIER, name, 0.0, start, self.pos)

    def next_token(self) -> Token:
        self.skip_whitespace()
        ch = self.current

        if not ch:
            return Token(TokenType.END, "", 0.0, self.pos, self.pos)

        if _is_digit(ch) or ch == '.':
            return self.number()

        if ch == '\\':
            return self.command()

        if ch.isascii() and (ch.isalpha() or ch == '_'):
            return self.identifier()

        if ch in SINGLE_CHAR_TOKENS:
            start = self.pos
            self.advance()
            return Token(SINGLE_CHAR_TOKENS[ch], ch, 0.0, start, self.pos)

        raise LexerError(LexErrorKind.UNEXPECTED_CHARACTER, self.pos, self.pos + 1, ch)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.END:
                return

    def tokenize(self) -> List[Token]:
        """Drain the stream into a list ending with END."""
        return list(self)
