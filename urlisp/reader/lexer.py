"""
  UrLisp Lexer

- Explicit finite-state machine: every LexState has one transition routine that
  consumes characters through a shared cursor and names the next state (or None
  to halt the machine).
- Tokens are produced lazily, one pull at a time, and the stream is single pass:
  to lex the same text again, build a new Lexer.
- The stream ends with exactly one EOF token, or stops early after one ERROR token.

    (plus 1 2)  ->  LPAREN SYMBOL(plus) INTEGER(1) INTEGER(2) RPAREN EOF
"""

from __future__ import annotations

import enum
import string
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator, Optional


WHITESPACE = " \f\n\r\t\v"
LPAREN = "("
RPAREN = ")"
QUOTE = "'"
MINUS = "-"
SYMBOL_CHARS = string.ascii_letters
DIGITS = string.digits

# Returned by Lexer.next() once the input is exhausted
EOF = ""


class TokenType(enum.Enum):
    EOF = "eof"
    SYMBOL = "symbol"
    LPAREN = "lparen"
    RPAREN = "rparen"
    QUOTE = "quote"
    ERROR = "error"
    INTEGER = "integer"


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    position: int
    message: Optional[str] = None

    def __str__(self):
        if self.type is TokenType.EOF:
            return "EOF"
        return self.text


class LexState(enum.Enum):
    SCAN_EXPR = "scan-expression"
    LEFT_PAREN = "lex-left-paren"
    RIGHT_PAREN = "lex-right-paren"
    NUMBER = "lex-number"
    SYMBOL = "lex-symbol"
    QUOTE = "lex-quote"


def _describe(c: str) -> str:
    return "EOF" if c == EOF else c


class Lexer:
    """Character cursor plus token queue driven by the state transitions below."""

    def __init__(self, source: str):
        self.source: str = source
        self.start: int = 0
        self.pos: int = 0
        self.width: int = 1
        self.state: Optional[LexState] = LexState.SCAN_EXPR
        self.tokens: deque[Token] = deque()

    # --- Cursor ---
    def next(self) -> str:
        if self.pos >= len(self.source):
            self.width = 0
            return EOF
        c = self.source[self.pos]
        self.width = 1
        self.pos += self.width
        return c

    def backup(self) -> None:
        self.pos -= self.width

    def ignore(self) -> None:
        self.start = self.pos

    def peek(self) -> str:
        c = self.next()
        self.backup()
        return c

    def accept(self, chars: str) -> bool:
        c = self.next()
        if c != EOF and c in chars:
            return True
        self.backup()
        return False

    def accept_run(self, chars: str) -> int:
        count = 0
        while self.accept(chars):
            count += 1
        return count

    # --- Output ---
    def emit(self, token_type: TokenType) -> None:
        self.tokens.append(Token(token_type, self.source[self.start:self.pos], self.start))
        self.start = self.pos

    def errorf(self, message: str, char: str) -> None:
        """Queue an ERROR token; returning its result halts the machine."""
        self.tokens.append(Token(TokenType.ERROR, char, self.pos, message))
        return None

    # --- Driving ---
    def next_token(self) -> Optional[Token]:
        """Run transitions until a token is available; None once the machine halted."""
        while not self.tokens:
            if self.state is None:
                return None
            self.state = TRANSITIONS[self.state](self)
        return self.tokens.popleft()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token
            if token.type in (TokenType.EOF, TokenType.ERROR):
                return


def lex_expr(lexer: Lexer) -> Optional[LexState]:
    while True:
        c = lexer.next()
        if c == EOF:
            break
        if c == LPAREN:
            return LexState.LEFT_PAREN
        if c == RPAREN:
            return LexState.RIGHT_PAREN
        if c == MINUS or c in DIGITS:
            lexer.backup()
            return LexState.NUMBER
        if c in SYMBOL_CHARS:
            lexer.backup()
            return LexState.SYMBOL
        if c == QUOTE:
            return LexState.QUOTE
        if c in WHITESPACE:
            lexer.ignore()
            continue
        return lexer.errorf(f"Unexpected input '{c}' while lexing expression", c)
    lexer.emit(TokenType.EOF)
    return None


def lex_left_paren(lexer: Lexer) -> Optional[LexState]:
    lexer.emit(TokenType.LPAREN)
    return LexState.SCAN_EXPR


def lex_right_paren(lexer: Lexer) -> Optional[LexState]:
    lexer.emit(TokenType.RPAREN)
    return LexState.SCAN_EXPR


def lex_number(lexer: Lexer) -> Optional[LexState]:
    lexer.accept(MINUS)
    if lexer.accept_run(DIGITS) == 0:
        c = lexer.peek()
        return lexer.errorf(f"Bad input '{_describe(c)}' while lexing integer", c)
    # Integers and symbols must be separated
    c = lexer.peek()
    if c != EOF and (c in SYMBOL_CHARS or c == QUOTE):
        return lexer.errorf(f"Bad input '{c}' while lexing integer", c)
    lexer.emit(TokenType.INTEGER)
    return LexState.SCAN_EXPR


def lex_symbol(lexer: Lexer) -> Optional[LexState]:
    lexer.accept_run(SYMBOL_CHARS)
    c = lexer.peek()
    if c != EOF and (c in DIGITS or c == MINUS or c == QUOTE):
        return lexer.errorf(f"Bad input '{c}' while lexing symbol", c)
    lexer.emit(TokenType.SYMBOL)
    return LexState.SCAN_EXPR


def lex_quote(lexer: Lexer) -> Optional[LexState]:
    lexer.emit(TokenType.QUOTE)
    return LexState.SCAN_EXPR


TRANSITIONS: dict[LexState, Callable[[Lexer], Optional[LexState]]] = {
    LexState.SCAN_EXPR: lex_expr,
    LexState.LEFT_PAREN: lex_left_paren,
    LexState.RIGHT_PAREN: lex_right_paren,
    LexState.NUMBER: lex_number,
    LexState.SYMBOL: lex_symbol,
    LexState.QUOTE: lex_quote,
}


def lex(source: str) -> Iterator[Token]:
    """Token generator for `source`; see Lexer for the stream contract."""
    return iter(Lexer(source))
