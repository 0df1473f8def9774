"""Tokenizer for the pseudocode language."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    """Kinds of tokens produced by :func:`tokenize`."""

    INPUT = auto()
    OUTPUT = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()
    OPERATOR = auto()
    TRUE = auto()
    FALSE = auto()
    ASSIGN = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()
    ENDIF = auto()
    FOR = auto()
    TO = auto()
    NEXT = auto()
    WHILE = auto()
    ENDWHILE = auto()
    REPEAT = auto()
    UNTIL = auto()
    PROCEDURE = auto()
    FUNCTION = auto()
    RETURN = auto()
    COLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    UNKNOWN = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType
    value: str


_KEYWORDS: dict[str, TokenType] = {
    t.name: t
    for t in (
        TokenType.INPUT,
        TokenType.OUTPUT,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.IF,
        TokenType.THEN,
        TokenType.ELSE,
        TokenType.ENDIF,
        TokenType.FOR,
        TokenType.TO,
        TokenType.NEXT,
        TokenType.WHILE,
        TokenType.ENDWHILE,
        TokenType.REPEAT,
        TokenType.UNTIL,
        TokenType.PROCEDURE,
        TokenType.FUNCTION,
        TokenType.RETURN,
    )
}

_SINGLE_CHAR_TYPES = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

_TOKEN_RE = re.compile(
    r"""
    (?P<space>[ \t\n\r\f\v]+)
  | (?P<lbracket>\[)
  | (?P<rbracket>\])
  | (?P<word>[A-Za-z][A-Za-z0-9_]*)
  | (?P<number>[0-9]+)
  | "(?P<string>[^"]*)"?
  | (?P<assign><-)
  | (?P<double><=|>=|<>)
  | (?P<single>[-+*/=<>%():,])
  | (?P<unknown>.)
    """,
    re.VERBOSE | re.DOTALL,
)


def look_keyword(word: str) -> TokenType:
    """Return the keyword type for ``word``, or IDENTIFIER if it is not one."""
    return _KEYWORDS.get(word, TokenType.IDENTIFIER)


def _scan(code: str) -> Iterator[Token]:
    for match in _TOKEN_RE.finditer(code):
        kind = match.lastgroup
        text = match.group(kind) if kind is not None else ""
        if kind == "space":
            continue
        if kind == "lbracket":
            yield Token(TokenType.LPAREN, "[")
        elif kind == "rbracket":
            yield Token(TokenType.RPAREN, "]")
        elif kind == "word":
            yield Token(look_keyword(text), text)
        elif kind == "number":
            yield Token(TokenType.NUMBER, text)
        elif kind == "assign":
            yield Token(TokenType.ASSIGN, "<-")
        elif kind == "double":
            yield Token(TokenType.OPERATOR, text)
        elif kind == "single":
            yield Token(_SINGLE_CHAR_TYPES.get(text, TokenType.OPERATOR), text)
        elif kind == "unknown":
            yield Token(TokenType.UNKNOWN, text)
        else:
            # The string alternative has an optional closing quote, so its
            # group is the only one that can match with lastgroup unset.
            yield Token(TokenType.STRING, match.group("string") or "")
    yield Token(TokenType.END, "")


def tokenize(code: str) -> list[Token]:
    """Split ``code`` into tokens, always ending with an END token."""
    return list(_scan(code))