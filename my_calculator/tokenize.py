import math
from typing import Iterator

from my_calculator.errors import InvalidNumberLiteral, UnexpectedToken
from my_calculator.token import PUNCTUATORS, Token, TokenType, new_token


def is_number_char(char: str) -> bool:
    return "0" <= char <= "9" or char == "."


def is_identifier_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def read_number(expression: str, index: int) -> tuple[Token, int]:
    end = index
    while end < len(expression) and is_number_char(expression[end]):
        end += 1
    text = expression[index:end]
    if text.count(".") > 1 or not any(char.isdigit() for char in text):
        raise InvalidNumberLiteral(index, text)
    value = float(text)
    if not math.isfinite(value):
        raise InvalidNumberLiteral(index, text)
    return new_token(TokenType.Number, expression, index, end, value), end


def read_identifier(expression: str, index: int) -> tuple[Token, int]:
    end = index + 1
    while end < len(expression) and is_identifier_char(expression[end]):
        end += 1
    return new_token(TokenType.Identifier, expression, index, end), end


def generate_tokens(expression: str) -> Iterator[Token]:
    index = 0
    while index < len(expression):
        char = expression[index]
        if char.isspace():
            index += 1
            continue
        if is_number_char(char):
            token, index = read_number(expression, index)
            yield token
            continue
        if char.isalpha():
            token, index = read_identifier(expression, index)
            yield token
            continue
        if char in PUNCTUATORS:
            yield new_token(PUNCTUATORS[char], expression, index, index + 1)
            index += 1
            continue
        raise UnexpectedToken(index, char)
    yield new_token(TokenType.EOF, expression, index, index)


class TokenStream:
    """Lazy token sequence over one expression.

    Every iteration re-lexes from the start of the expression, so the stream
    can be walked any number of times. Lexing errors surface when the
    offending character is reached.
    """

    def __init__(self, expression: str) -> None:
        self.expression = expression

    def __iter__(self) -> Iterator[Token]:
        return generate_tokens(self.expression)


def tokenize(expression: str) -> TokenStream:
    return TokenStream(expression)
