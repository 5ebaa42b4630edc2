from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional


class TokenKind(Enum):
    AND = "&"
    OR = "|"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    CARET = "^"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    NUM = "number"
    END_OF_INPUT = "end of input"


class Precedence(IntEnum):
    """Operator binding strength, lowest to highest."""
    NONE = 0
    BITWISE = 1     # & |
    ADD_SUB = 2     # + -
    MUL_DIV = 3     # * /
    EXPONENT = 4    # ^
    NEGATIVE = 5    # unary -


# infix operators only; everything else binds at NONE
PRECEDENCE = {
    TokenKind.AND: Precedence.BITWISE,
    TokenKind.OR: Precedence.BITWISE,
    TokenKind.ADD: Precedence.ADD_SUB,
    TokenKind.SUBTRACT: Precedence.ADD_SUB,
    TokenKind.MULTIPLY: Precedence.MUL_DIV,
    TokenKind.DIVIDE: Precedence.MUL_DIV,
    TokenKind.CARET: Precedence.EXPONENT,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[float] = None
    column: Optional[int] = field(default=None, compare=False)

    @property
    def precedence(self) -> Precedence:
        return PRECEDENCE.get(self.kind, Precedence.NONE)

    def __str__(self):
        if self.kind is TokenKind.NUM:
            return f"number {self.value!r}"
        if self.kind is TokenKind.END_OF_INPUT:
            return "end of input"
        return repr(self.kind.value)


END = Token(TokenKind.END_OF_INPUT)


def list_operators():
    out = []
    for kind, prec in PRECEDENCE.items():
        out.append({"symbol": kind.value, "name": kind.name.lower(),
                    "precedence": prec.name.lower(), "level": int(prec)})
    out.append({"symbol": "-", "name": "negate", "precedence": "negative",
                "level": int(Precedence.NEGATIVE)})
    return sorted(out, key=lambda d: (d["level"], d["name"]))
