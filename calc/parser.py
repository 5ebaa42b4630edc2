
import logging
from dataclasses import dataclass

from .errors import CalcError, ParseError
from .lexer import Lexer
from .tokens import Precedence, Token, TokenKind

logger = logging.getLogger(__name__)


class Node: ...

@dataclass(frozen=True)
class Number(Node):
    value: float

@dataclass(frozen=True)
class UnaryOp(Node):
    op: str
    operand: Node

@dataclass(frozen=True)
class BinOp(Node):
    op: str
    left: Node
    right: Node


# token -> (node op, precedence used for the right operand)
INFIX = {
    TokenKind.ADD: ("+", Precedence.ADD_SUB),
    TokenKind.SUBTRACT: ("-", Precedence.ADD_SUB),
    TokenKind.MULTIPLY: ("*", Precedence.MUL_DIV),
    TokenKind.DIVIDE: ("/", Precedence.MUL_DIV),
    TokenKind.CARET: ("^", Precedence.EXPONENT),
    TokenKind.AND: ("&", Precedence.BITWISE),
    TokenKind.OR: ("|", Precedence.BITWISE),
}


class Parser:
    """Precedence-climbing parser holding one token of lookahead.

    The right operand of an infix operator is parsed at that operator's own
    precedence, so equal-precedence chains group to the left. That includes
    ``^``: ``2^3^2`` is ``(2^3)^2``.
    """

    def __init__(self, src: str):
        self.lexer = Lexer(src)
        self.current: Token = next(self.lexer)

    def parse(self) -> Node:
        return self.generate(Precedence.NONE)

    def generate(self, min_prec: Precedence) -> Node:
        left = self.parse_number()
        while min_prec < self.current.precedence:
            if self.current.kind is TokenKind.END_OF_INPUT:
                break
            left = self.convert_token_to_node(left)
        return left

    def get_next_token(self):
        self.current = next(self.lexer)

    def parse_number(self) -> Node:
        tok = self.current
        if tok.kind is TokenKind.SUBTRACT:
            self.get_next_token()
            return UnaryOp("-", self.generate(Precedence.NEGATIVE))
        if tok.kind is TokenKind.NUM:
            self.get_next_token()
            return Number(tok.value)
        if tok.kind is TokenKind.LEFT_PAREN:
            self.get_next_token()
            expr = self.generate(Precedence.NONE)
            self.check_paren(TokenKind.RIGHT_PAREN)
            return expr
        if tok.kind is TokenKind.END_OF_INPUT:
            raise ParseError("Unexpected end of input", column=tok.column)
        raise ParseError(f"Unexpected token {tok}", column=tok.column)

    def check_paren(self, expected: TokenKind):
        if self.current.kind is not expected:
            raise ParseError(f"Expected {expected.value!r}, got {self.current}",
                             column=self.current.column)
        self.get_next_token()

    def convert_token_to_node(self, left: Node) -> Node:
        tok = self.current
        if tok.kind not in INFIX:
            raise ParseError(f"Unexpected operator {tok}", column=tok.column)
        op, prec = INFIX[tok.kind]
        self.get_next_token()
        right = self.generate(prec)
        return BinOp(op, left, right)


def parse_expression(src: str) -> Node:
    try:
        tree = Parser(src).parse()
    except RecursionError:
        # brackets and unary minus nest through the parser's own recursion
        logger.debug("parse failed for %r: nested too deeply", src)
        raise ParseError("Expression is nested too deeply") from None
    except CalcError as e:
        logger.debug("parse failed for %r: %s", src, e)
        raise
    logger.debug("parsed %r", src)
    return tree
