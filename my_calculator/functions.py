import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class AngleMode(str, Enum):
    Degrees = "degrees"
    Radians = "radians"
    Gradians = "gradians"


def to_radians(value: float, mode: AngleMode) -> float:
    match mode:
        case AngleMode.Radians:
            return value
        case AngleMode.Degrees:
            return math.radians(value)
        case AngleMode.Gradians:
            return math.radians(value * 0.9)
    raise ValueError(f"invalid angle mode {mode!r}")


def from_radians(value: float, mode: AngleMode) -> float:
    match mode:
        case AngleMode.Radians:
            return value
        case AngleMode.Degrees:
            return math.degrees(value)
        case AngleMode.Gradians:
            return math.degrees(value) / 0.9
    raise ValueError(f"invalid angle mode {mode!r}")


def safe_call(function: Callable[[float], float], value: float) -> float:
    # math raises where IEEE arithmetic would produce nan or inf
    try:
        return float(function(value))
    except OverflowError:
        return math.inf
    except (ValueError, ZeroDivisionError):
        return math.nan


def reciprocal(value: float) -> float:
    if value == 0:
        return math.inf
    return 1.0 / value


def logarithm(function: Callable[[float], float]) -> Callable[[float], float]:
    return lambda v: -math.inf if v == 0 else function(v)


def rounding(function: Callable[[float], int]) -> Callable[[float], float]:
    return lambda v: float(function(v)) if math.isfinite(v) else v


def sinh(value: float) -> float:
    try:
        return math.sinh(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def factorial(value: float) -> float:
    if math.isnan(value) or value < 0:
        return math.nan
    if value > 170:
        return math.inf
    if not value.is_integer():
        return math.nan
    return float(math.factorial(int(value)))


@dataclass(frozen=True)
class Function:
    name: str
    function: Callable[[float, AngleMode], float]

    def evaluate(self, value: float, mode: AngleMode) -> float:
        return self.function(value, mode)


@dataclass(frozen=True)
class Constant:
    name: str
    value: float


def trig(function: Callable[[float], float]) -> Callable[[float, AngleMode], float]:
    return lambda v, mode: safe_call(function, to_radians(v, mode))


def inverse_trig(function: Callable[[float], float]) -> Callable[[float, AngleMode], float]:
    def wrapper(v: float, mode: AngleMode) -> float:
        result = safe_call(function, v)
        if math.isnan(result):
            return result
        return from_radians(result, mode)

    return wrapper


def plain(function: Callable[[float], float]) -> Callable[[float, AngleMode], float]:
    return lambda v, _: safe_call(function, v)


FUNCTIONS = [
    Function("sin", trig(math.sin)),
    Function("cos", trig(math.cos)),
    Function("tan", trig(math.tan)),
    Function("asin", inverse_trig(math.asin)),
    Function("acos", inverse_trig(math.acos)),
    Function("atan", inverse_trig(math.atan)),
    Function("cosec", lambda v, mode: reciprocal(trig(math.sin)(v, mode))),
    Function("sec", lambda v, mode: reciprocal(trig(math.cos)(v, mode))),
    Function("cot", lambda v, mode: reciprocal(trig(math.tan)(v, mode))),
    Function("acosec", lambda v, mode: inverse_trig(math.asin)(reciprocal(v), mode)),
    Function("asec", lambda v, mode: inverse_trig(math.acos)(reciprocal(v), mode)),
    Function("acot", lambda v, mode: inverse_trig(math.atan)(reciprocal(v), mode)),
    Function("sinh", plain(sinh)),
    Function("cosh", plain(math.cosh)),
    Function("tanh", plain(math.tanh)),
    Function("asinh", plain(math.asinh)),
    Function("acosh", plain(math.acosh)),
    Function("atanh", plain(math.atanh)),
    Function("exp", plain(math.exp)),
    Function("ln", plain(logarithm(math.log))),
    Function("log", plain(logarithm(math.log10))),
    Function("log2", plain(logarithm(math.log2))),
    Function("sqrt", plain(math.sqrt)),
    Function("abs", plain(abs)),
    Function("ceil", plain(rounding(math.ceil))),
    Function("floor", plain(rounding(math.floor))),
    Function("factorial", lambda v, _: factorial(v)),
]

CONSTANTS = [
    Constant("π", math.pi),
    Constant("pi", math.pi),
    Constant("e", math.e),
    Constant("Φ", 1.61803),
    Constant("phi", 1.61803),
    Constant("C", 299792458.0),
    Constant("ℎ", 6.626e-34),
    Constant("G", 6.674e-11),
]


def get_functions() -> dict[str, Function]:
    return {function.name: function for function in FUNCTIONS}


def get_constants() -> dict[str, Constant]:
    return {constant.name: constant for constant in CONSTANTS}
