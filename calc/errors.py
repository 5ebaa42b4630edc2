"""Failures raised while lexing, parsing or evaluating an expression.

Every failure is a ``CalcError``; callers that only need "could not evaluate"
catch the base class, richer callers look at ``kind`` or the subclass.
"""


class CalcError(Exception):
    kind = "error"

    def __init__(self, message: str, column=None):
        super().__init__(message)
        self.message = message
        self.column = column

    def to_dict(self):
        out = {"kind": self.kind, "message": self.message}
        if self.column is not None:
            out["column"] = self.column
        return out


class LexicalError(CalcError):
    """Unrecognised character or malformed numeric literal."""
    kind = "lexical"


class ParseError(CalcError):
    """Unexpected token, unbalanced parenthesis or premature end of input."""
    kind = "syntax"


class EvaluationError(CalcError):
    """Arithmetic failure while reducing a tree, e.g. division by zero."""
    kind = "evaluation"
