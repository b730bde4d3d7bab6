from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from my_calculator.functions import Function
from my_calculator.token import Token


class NodeKind(IntEnum):
    Number = 1
    Neg = 2
    Add = 3
    Sub = 4
    Mul = 5
    Div = 6
    Pow = 7
    Function = 8


@dataclass
class Node:
    kind: NodeKind
    token: Token
    value: Optional[float] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    function: Optional[Function] = None


def new_number(value: float, token: Token) -> Node:
    return Node(NodeKind.Number, token, value=value)


def new_binary(kind: NodeKind, left: Node, right: Node, token: Token) -> Node:
    return Node(kind, token, left=left, right=right)


def new_unary(kind: NodeKind, left: Node, token: Token) -> Node:
    return Node(kind, token, left=left)


def new_function_call(function: Function, argument: Node, token: Token) -> Node:
    return Node(NodeKind.Function, token, left=argument, function=function)


def to_text(node: Node) -> str:
    """Render a tree in fully parenthesised prefix form, e.g. ``(+ 2 (* 3 4))``."""
    parts: list[str] = []
    stack: list[Node | str] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        match item.kind:
            case NodeKind.Number:
                parts.append(item.token.expression or repr(item.value))
            case NodeKind.Neg:
                stack.extend([")", item.left, "(neg "])
            case NodeKind.Function:
                stack.extend([")", item.left, f"({item.function.name} "])
            case NodeKind.Add | NodeKind.Sub | NodeKind.Mul | NodeKind.Div | NodeKind.Pow:
                stack.extend([")", item.right, " ", item.left, f"({item.token.expression} "])
            case _:
                raise ValueError("invalid node type")
    return "".join(parts)
