
from typing import Iterator

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import LexicalError
from .tokens import END, Token, TokenKind

# Terminal names match TokenKind member names. NUM is deliberately loose
# (any run of digits and dots); float() decides whether it is a number.
GRAMMAR = r"""
start: token*
token: AND | OR | ADD | SUBTRACT | MULTIPLY | DIVIDE | CARET
     | LEFT_PAREN | RIGHT_PAREN | NUM
AND: "&"
OR: "|"
ADD: "+"
SUBTRACT: "-"
MULTIPLY: "*"
DIVIDE: "/"
CARET: "^"
LEFT_PAREN: "("
RIGHT_PAREN: ")"
NUM: /[0-9][0-9.]*/
%ignore /[ \t\n]+/
"""

_lark = Lark(GRAMMAR, start="start", parser="lalr", lexer="basic")


class Lexer:
    """Lazy token stream over one expression.

    Single forward pass, not restartable. Once the text is used up every
    further ``next()`` returns the END_OF_INPUT token; the parser stops on
    its precedence, never on StopIteration.
    """

    def __init__(self, src: str):
        self.src = src
        self._stream = _lark.lex(src)
        self._done = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._done:
            return END
        try:
            tok = next(self._stream)
        except StopIteration:
            self._done = True
            return END
        except UnexpectedCharacters as e:
            raise LexicalError(f"Unrecognized character {e.char!r} at column {e.column}",
                               column=e.column) from e
        return self._convert(tok)

    def _convert(self, tok) -> Token:
        kind = TokenKind[tok.type]
        if kind is not TokenKind.NUM:
            return Token(kind, column=tok.column)
        try:
            value = float(tok.value)
        except ValueError:
            raise LexicalError(f"Malformed number {str(tok.value)!r} at column {tok.column}",
                               column=tok.column) from None
        return Token(kind, value, column=tok.column)


def tokenize(src: str, limit: int = 10_000):
    """Eagerly collect tokens up to and including the first END_OF_INPUT."""
    out = []
    for tok in Lexer(src):
        out.append(tok)
        if tok.kind is TokenKind.END_OF_INPUT or len(out) >= limit:
            break
    return out
