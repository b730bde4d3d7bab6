import math
from typing import Optional

from my_calculator.config import Settings
from my_calculator.errors import DivisionByZero
from my_calculator.functions import AngleMode, get_constants, get_functions
from my_calculator.node import Node, NodeKind
from my_calculator.parse import Parse
from my_calculator.tokenize import tokenize


def divide(left: float, right: float, node: Node) -> float:
    if right == 0:
        raise DivisionByZero(node.token.location)
    return left / right


def power(left: float, right: float, node: Node) -> float:
    if left == 0 and right < 0:
        raise DivisionByZero(node.token.location)
    try:
        return math.pow(left, right)
    except OverflowError:
        if left < 0 and right.is_integer() and right % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        # negative base with a fractional exponent
        return math.nan


def perform_binary(node: Node, left: float, right: float) -> float:
    match node.kind:
        case NodeKind.Add:
            return left + right
        case NodeKind.Sub:
            return left - right
        case NodeKind.Mul:
            return left * right
        case NodeKind.Div:
            return divide(left, right, node)
        case NodeKind.Pow:
            return power(left, right, node)
    raise ValueError("invalid node type")


def evaluate_node(node: Node, mode: AngleMode = AngleMode.Degrees) -> float:
    """Reduce an expression tree to its value.

    Walks the tree in post-order with an explicit stack, so the depth of
    the tree is not limited by the interpreter's recursion limit.
    """
    values: list[float] = []
    stack: list[tuple[Node, bool]] = [(node, False)]
    while stack:
        current, visited = stack.pop()
        if current.kind == NodeKind.Number:
            values.append(current.value)
            continue
        if not visited:
            stack.append((current, True))
            if current.right is not None:
                stack.append((current.right, False))
            stack.append((current.left, False))
            continue
        match current.kind:
            case NodeKind.Neg:
                values.append(-values.pop())
            case NodeKind.Function:
                values.append(current.function.evaluate(values.pop(), mode))
            case _:
                right = values.pop()
                left = values.pop()
                values.append(perform_binary(current, left, right))
    if len(values) != 1:
        raise ValueError("invalid expression tree")
    return values[0]


class Evaluator:
    """Evaluates expressions under a fixed configuration.

    An evaluator keeps no state between calls; the same instance can be
    shared freely between threads.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.functions = get_functions()
        self.constants = get_constants()

    def parse(self, expression: str) -> Node:
        parser = Parse(
            tokenize(expression),
            self.settings.max_depth,
            self.functions,
            self.constants,
        )
        return parser.parse()

    def evaluate(self, expression: str) -> float:
        return evaluate_node(self.parse(expression), self.settings.angle_mode)


def evaluate(
    expression: str,
    *,
    angle_mode: Optional[AngleMode] = None,
    max_depth: Optional[int] = None,
) -> float:
    settings = Settings()
    if angle_mode is not None:
        settings = settings.replace(angle_mode=AngleMode(angle_mode))
    if max_depth is not None:
        settings = settings.replace(max_depth=max_depth)
    return Evaluator(settings).evaluate(expression)
