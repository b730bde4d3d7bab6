from my_calculator.token import Token


class EvalError(Exception):
    """Base class for every failure of a single evaluation.

    ``location`` is the character offset the failure points at, so callers can
    render it with :func:`my_calculator.helper.error_message`.
    """

    def __init__(self, location: int, message: str) -> None:
        super().__init__(message)
        self.location = location
        self.message = message


class UnexpectedToken(EvalError):
    def __init__(self, location: int, token: Token | str) -> None:
        text = token.describe() if isinstance(token, Token) else f"'{token}'"
        super().__init__(location, f"unexpected token {text}")
        self.token = token


class UnexpectedEnd(EvalError):
    def __init__(self, location: int) -> None:
        super().__init__(location, "unexpected end of input")


class DivisionByZero(EvalError):
    def __init__(self, location: int) -> None:
        super().__init__(location, "division by zero")


class InvalidNumberLiteral(EvalError):
    def __init__(self, location: int, text: str) -> None:
        super().__init__(location, f"invalid number literal '{text}'")
        self.text = text


class NestingTooDeep(EvalError):
    def __init__(self, location: int, limit: int) -> None:
        super().__init__(location, f"expression nested deeper than {limit} levels")
        self.limit = limit
