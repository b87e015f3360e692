"""
  UrLisp Parser

- Pulls tokens from a Lexer and builds exactly one expression per call, leaving
  any trailing input unread.
- Uses an explicit stack of pending items: raw LPAREN/QUOTE tokens and
  completed values. A `)` folds everything above the nearest `(` into a list.
- Quote syntax is desugared on the way in:  'x  ->  (quote x)
- Records how much of the source the expression used, so a front end can echo
  exactly the parsed prefix.

Expressions are plain values: Symbol, int, LispList.
"""

from __future__ import annotations

import logging
from typing import Union

from urlisp import SExpression, INT_MIN, INT_MAX
from urlisp.errors import UrLispLexError, UrLispSyntaxError
from urlisp.reader.lexer import Lexer, Token, TokenType
from urlisp.types.lisp_list import LispList
from urlisp.types.symbol import Symbol, QUOTE

logger = logging.getLogger(__name__)

StackItem = Union[Token, SExpression]


def _is_marker(item: StackItem, token_type: TokenType) -> bool:
    return isinstance(item, Token) and item.type is token_type


def push_maybe_quoted(stack: list[StackItem], item: SExpression) -> None:
    """Push `item`, first wrapping it in (quote ...) once per pending quote mark."""
    while stack and _is_marker(stack[-1], TokenType.QUOTE):
        stack.pop()
        item = LispList.of(QUOTE, item)
    stack.append(item)


def build_list(stack: list[StackItem], closing: Token) -> None:
    """Fold the items above the nearest '(' into a list, in source order."""
    items: list[SExpression] = []
    while True:
        if not stack:
            raise UrLispSyntaxError(
                f"Unbalanced ')' at character {closing.position}", closing.position
            )
        item = stack.pop()
        if isinstance(item, Token):
            if item.type is TokenType.LPAREN:
                items.reverse()
                push_maybe_quoted(stack, LispList(items))
                return
            raise UrLispSyntaxError(
                f"Quote at character {item.position} has nothing to quote", item.position
            )
        items.append(item)


def integer_value(token: Token) -> int:
    value = int(token.text)
    if not INT_MIN <= value <= INT_MAX:
        raise UrLispSyntaxError(
            f"Integer literal {token.text} out of range at character {token.position}",
            token.position,
        )
    return value


class Parser:
    def __init__(self, source: Union[str, Lexer]):
        self.lexer: Lexer = source if isinstance(source, Lexer) else Lexer(source)
        self.tokens = iter(self.lexer)
        self.end: int = 0

    @property
    def source(self) -> str:
        return self.lexer.source

    @property
    def consumed(self) -> str:
        """The source text read by the expressions parsed so far."""
        return self.source[:self.end]

    def advance(self) -> Token:
        token = next(self.tokens, None)
        if token is None:
            # The lexer already halted on an error or EOF that was reported
            raise UrLispSyntaxError("Token stream is exhausted", self.lexer.pos)
        if token.type is not TokenType.ERROR:
            self.end = token.position + len(token.text)
        return token

    def parse_expr(self) -> SExpression:
        stack: list[StackItem] = []

        while not stack or isinstance(stack[0], Token):
            token = self.advance()
            match token.type:
                case TokenType.SYMBOL:
                    push_maybe_quoted(stack, Symbol(token.text))
                case TokenType.INTEGER:
                    push_maybe_quoted(stack, integer_value(token))
                case TokenType.LPAREN | TokenType.QUOTE:
                    stack.append(token)
                case TokenType.RPAREN:
                    build_list(stack, token)
                case TokenType.ERROR:
                    raise UrLispLexError(
                        f"Lex error at character {token.position}: {token.message}",
                        token.position,
                        token.text,
                    )
                case TokenType.EOF:
                    raise UrLispSyntaxError(
                        "S-expression interrupted by end of input", token.position
                    )

        expr = stack[0]
        logger.debug("parsed %s from %r", expr, self.consumed)
        return expr


def parse_one(source: str) -> tuple[SExpression, str]:
    """Parse the first expression in `source`.

    Returns the expression and the exact prefix of `source` it was read from.
    Raises UrLispSyntaxError (or its UrLispLexError subclass) on failure.
    """
    parser = Parser(source)
    expr = parser.parse_expr()
    return expr, parser.consumed
