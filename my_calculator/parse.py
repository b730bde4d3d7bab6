from my_calculator.config import DEFAULT_MAX_DEPTH
from my_calculator.errors import NestingTooDeep, UnexpectedEnd, UnexpectedToken
from my_calculator.functions import Constant, Function, get_constants, get_functions
from my_calculator.node import (
    Node,
    NodeKind,
    new_binary,
    new_function_call,
    new_number,
    new_unary,
)
from my_calculator.token import Token, TokenType, equal
from my_calculator.tokenize import TokenStream, tokenize
from my_calculator.utils import Peekable

ADDITIVE = {TokenType.Plus: NodeKind.Add, TokenType.Minus: NodeKind.Sub}
MULTIPLICATIVE = {TokenType.Star: NodeKind.Mul, TokenType.Slash: NodeKind.Div}


def unexpected(token: Token) -> UnexpectedToken | UnexpectedEnd:
    if equal(token, TokenType.EOF):
        return UnexpectedEnd(token.location)
    return UnexpectedToken(token.location, token)


class Parse:
    """Recursive descent parser producing an expression tree.

    ::

        expr    := term (('+' | '-') term)*
        term    := power (('*' | '/') power)*
        power   := factor ('^' factor)*
        factor  := Number | Constant | Function '(' expr ')'
                 | '(' expr ')' | '-' factor
    """

    tokens: Peekable[Token]

    def __init__(
        self,
        tokens: TokenStream,
        max_depth: int = DEFAULT_MAX_DEPTH,
        functions: dict[str, Function] | None = None,
        constants: dict[str, Constant] | None = None,
    ) -> None:
        self.tokens = Peekable(tokens)
        self.max_depth = max_depth
        self.functions = get_functions() if functions is None else functions
        self.constants = get_constants() if constants is None else constants
        self.depth = 0

    def parse(self) -> Node:
        node = self.expression_parse()
        token = self.tokens.peek()
        if not equal(token, TokenType.EOF):
            raise UnexpectedToken(token.location, token)
        return node

    def expression_parse(self) -> Node:
        return self.convert_add_token()

    def convert_add_token(self) -> Node:
        node = self.convert_mul_token()
        while (kind := ADDITIVE.get(self.tokens.peek().kind)) is not None:
            token = next(self.tokens)
            next_node = self.convert_mul_token()
            node = new_binary(kind, node, next_node, token)
        return node

    def convert_mul_token(self) -> Node:
        node = self.convert_pow_token()
        while (kind := MULTIPLICATIVE.get(self.tokens.peek().kind)) is not None:
            token = next(self.tokens)
            next_node = self.convert_pow_token()
            node = new_binary(kind, node, next_node, token)
        return node

    def convert_pow_token(self) -> Node:
        node = self.primary_token()
        while equal(self.tokens.peek(), TokenType.Caret):
            token = next(self.tokens)
            next_node = self.primary_token()
            node = new_binary(NodeKind.Pow, node, next_node, token)
        return node

    def primary_token(self) -> Node:
        token = next(self.tokens)
        match token.kind:
            case TokenType.Number:
                return new_number(token.value, token)
            case TokenType.LParen:
                self.enter(token)
                node = self.expression_parse()
                self.skip(TokenType.RParen)
                self.leave()
                return node
            case TokenType.Minus:
                self.enter(token)
                node = new_unary(NodeKind.Neg, self.primary_token(), token)
                self.leave()
                return node
            case TokenType.Identifier:
                return self.identifier(token)
        raise unexpected(token)

    def identifier(self, token: Token) -> Node:
        if (constant := self.constants.get(token.expression)) is not None:
            return new_number(constant.value, token)
        if (function := self.functions.get(token.expression)) is not None:
            self.enter(token)
            self.skip(TokenType.LParen)
            argument = self.expression_parse()
            self.skip(TokenType.RParen)
            self.leave()
            return new_function_call(function, argument, token)
        raise UnexpectedToken(token.location, token)

    def skip(self, kind: TokenType) -> Token:
        token = next(self.tokens)
        if not equal(token, kind):
            raise unexpected(token)
        return token

    def enter(self, token: Token) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(token.location, self.max_depth)

    def leave(self) -> None:
        self.depth -= 1


def parse(expression: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    return Parse(tokenize(expression), max_depth).parse()
