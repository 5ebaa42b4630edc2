import logging
from functools import lru_cache
from typing import Iterable, Union

import numpy as np
import pandas as pd

from calc.errors import CalcError
from calc.eval import eval_node
from calc.parser import Node, parse_expression

logger = logging.getLogger(__name__)

COLUMNS = ["expression", "value", "ok", "error_kind", "error"]


@lru_cache(maxsize=256)
def _cached_tree(expr: str) -> Node:
    # trees are immutable, safe to share between rows
    return parse_expression(expr)


def evaluate_one(src: str) -> dict:
    expr = "".join(str(src).split())
    try:
        value = eval_node(_cached_tree(expr))
    except CalcError as e:
        return {"expression": src, "value": np.nan, "ok": False,
                "error_kind": e.kind, "error": e.message}
    return {"expression": src, "value": value, "ok": True,
            "error_kind": None, "error": None}


def evaluate_series(expressions: Union[pd.Series, Iterable[str]]) -> pd.DataFrame:
    """
    Evaluate every expression independently, one row each.
    A failing row gets value NaN plus the error kind/message; it never
    stops the other rows. A Series input keeps its index.
    """
    if isinstance(expressions, pd.Series):
        index = expressions.index
        srcs = expressions.tolist()
    else:
        srcs = list(expressions)
        index = pd.RangeIndex(len(srcs))
    rows = [evaluate_one(s) for s in srcs]
    out = pd.DataFrame(rows, index=index, columns=COLUMNS)
    out["value"] = out["value"].astype(float)
    out["ok"] = out["ok"].astype(bool)
    failed = int((~out["ok"]).sum())
    if failed:
        logger.info("batch of %d expressions: %d failed", len(out), failed)
    return out


def summarize(results: pd.DataFrame) -> dict:
    counts = results.loc[~results["ok"], "error_kind"].value_counts()
    return {
        "total": int(len(results)),
        "ok": int(results["ok"].sum()),
        "errors": {str(k): int(v) for k, v in counts.items()},
    }
