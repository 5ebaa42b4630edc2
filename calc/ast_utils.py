# calc/ast_utils.py
"""Tree walkers shared by the views, the analyzer and the service.

Left-leaning chains such as ``1+1+...+1`` are as deep as they are long, so
nothing here recurses: both walkers keep an explicit stack.
"""
from typing import Any, Callable, Dict, Iterator, Optional, Tuple
from .parser import Node, Number, UnaryOp, BinOp


def _children(n: Node):
    if isinstance(n, Number):
        return ()
    if isinstance(n, UnaryOp):
        return (("operand", n.operand),)
    if isinstance(n, BinOp):
        return (("left", n.left), ("right", n.right))
    raise TypeError(f"Unknown node {type(n)}")


def walk(node: Node) -> Iterator[Tuple[Node, int, Optional[str]]]:
    """Pre-order ``(node, depth, label)``; the root has depth 0, label None."""
    stack = [(node, 0, None)]
    while stack:
        n, depth, label = stack.pop()
        yield n, depth, label
        for child_label, child in reversed(_children(n)):
            stack.append((child, depth + 1, child_label))


def fold(node: Node, number: Callable, unary: Callable, binary: Callable):
    """Bottom-up reduction: ``number(n)``, ``unary(n, operand)``, ``binary(n, left, right)``."""
    out = []
    stack = [(node, False)]
    while stack:
        n, ready = stack.pop()
        kids = _children(n)
        if not kids:
            out.append(number(n))
        elif ready:
            args = out[-len(kids):]
            del out[-len(kids):]
            out.append(unary(n, *args) if len(kids) == 1 else binary(n, *args))
        else:
            stack.append((n, True))
            stack.extend((child, False) for _, child in reversed(kids))
    return out[0]


def ast_to_dict(node) -> Dict[str, Any]:
    return fold(
        node,
        lambda n: {"type": "Number", "value": n.value},
        lambda n, operand: {"type": "UnaryOp", "op": n.op, "operand": operand},
        lambda n, left, right: {"type": "BinOp", "op": n.op, "left": left, "right": right},
    )


def _label(n: Node) -> str:
    if isinstance(n, Number):
        return f"Number({n.value})"
    if isinstance(n, (UnaryOp, BinOp)):
        return f"{type(n).__name__}({n.op})"
    raise TypeError(f"Unknown node {type(n)}")


def ast_to_pretty(node, indent: str = "  ") -> str:
    lines = []
    for n, depth, label in walk(node):
        pre = f"{label}: " if label else ""
        lines.append(f"{indent * depth}{pre}{_label(n)}")
    return "\n".join(lines)


def ast_to_infix(node) -> str:
    """Fully parenthesised form; shows how the parser grouped things."""
    return fold(
        node,
        lambda n: repr(n.value),
        lambda n, operand: f"({n.op}{operand})",
        lambda n, left, right: f"({left} {n.op} {right})",
    )


def tree_depth(node) -> int:
    return max(depth for _, depth, _ in walk(node)) + 1
