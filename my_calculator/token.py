from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Number = 1
    Plus = 2
    Minus = 3
    Star = 4
    Slash = 5
    Caret = 6
    LParen = 7
    RParen = 8
    Identifier = 9
    EOF = 10


PUNCTUATORS = {
    "+": TokenType.Plus,
    "-": TokenType.Minus,
    "*": TokenType.Star,
    "/": TokenType.Slash,
    "^": TokenType.Caret,
    "(": TokenType.LParen,
    ")": TokenType.RParen,
}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    location: int
    length: int = 0
    expression: str = ""
    value: Optional[float] = None

    def describe(self) -> str:
        if self.kind == TokenType.EOF:
            return "end of input"
        return f"'{self.expression}'"


def new_token(
    token_type: TokenType, source: str, start: int, end: int, value: Optional[float] = None
) -> Token:
    return Token(token_type, start, end - start, source[start:end], value)


def equal(token: Token, kind: TokenType) -> bool:
    return token.kind == kind
