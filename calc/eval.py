
import logging

import numpy as np

from .errors import CalcError, EvaluationError
from .parser import BinOp, Number, UnaryOp, parse_expression

logger = logging.getLogger(__name__)

_I64 = np.iinfo(np.int64)


def to_i64(x: float) -> int:
    """Saturating float -> int64: truncate toward zero, clamp, NaN -> 0."""
    if np.isnan(x):
        return 0
    if x >= _I64.max:
        return int(_I64.max)
    if x <= _I64.min:
        return int(_I64.min)
    return int(x)


def _power(a, b):
    # real-valued pow: nan outside the real domain, inf on overflow
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(a), np.float64(b)))


OPS = {
    '+': lambda a,b: a + b,
    '-': lambda a,b: a - b,
    '*': lambda a,b: a * b,
    '^': _power,
    '&': lambda a,b: float(to_i64(a) & to_i64(b)),
    '|': lambda a,b: float(to_i64(a) | to_i64(b)),
}


def eval_node(node) -> float:
    # explicit stack: a chain like 1+1+...+1 is as deep as it is long
    values = []
    stack = [(node, 0)]
    while stack:
        n, state = stack.pop()
        if isinstance(n, Number):
            values.append(float(n.value))
        elif isinstance(n, UnaryOp):
            if n.op != '-':
                raise ValueError(f"Unknown unary op {n.op}")
            if state:
                values.append(-values.pop())
            else:
                stack += [(n, 1), (n.operand, 0)]
        elif isinstance(n, BinOp):
            if n.op == '/':
                # divisor first; the dividend is never reduced when it is zero
                if state == 0:
                    stack += [(n, 1), (n.right, 0)]
                elif state == 1:
                    if values[-1] == 0.0:
                        raise EvaluationError("Division by zero")
                    stack += [(n, 2), (n.left, 0)]
                else:
                    a = values.pop()
                    values.append(a / values.pop())
            elif n.op not in OPS:
                raise ValueError(f"Unknown binary op {n.op}")
            elif state:
                b = values.pop()
                a = values.pop()
                values.append(OPS[n.op](a, b))
            else:
                stack += [(n, 1), (n.right, 0), (n.left, 0)]
        else:
            raise TypeError(f"Unknown node {type(n)}")
    return values[0]


def evaluate(text: str) -> float:
    """Evaluate one arithmetic expression.

    All whitespace is removed first, then the text is parsed and the tree
    reduced. Any failure is raised as a ``CalcError`` subclass.
    """
    expr = "".join(text.split())
    try:
        result = eval_node(parse_expression(expr))
    except CalcError as e:
        logger.debug("could not evaluate %r: %s", text, e)
        raise
    logger.debug("%r = %r", expr, result)
    return result
