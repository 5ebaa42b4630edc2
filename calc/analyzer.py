from dataclasses import dataclass, field
from typing import List, Set
from .ast_utils import walk
from .parser import Number, BinOp, UnaryOp

@dataclass
class Analysis:
    operators: Set[str] = field(default_factory=set)
    literals: List[float] = field(default_factory=list)
    depth: int = 0
    nodes: int = 0

def analyze(node) -> Analysis:
    an = Analysis()
    for n, depth, _ in walk(node):
        an.nodes += 1
        an.depth = max(an.depth, depth + 1)
        if isinstance(n, Number):
            an.literals.append(n.value)
        elif isinstance(n, UnaryOp):
            # keep negation distinct from binary subtraction
            an.operators.add("neg")
        elif isinstance(n, BinOp):
            an.operators.add(n.op)
    return an
