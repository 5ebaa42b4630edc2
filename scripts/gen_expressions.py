"""
scripts/gen_expressions.py

Generates a corpus of random, well-formed arithmetic expressions and saves
it as CSV (one column, "expression").

Usage:
    python scripts/gen_expressions.py [out.csv]
"""

import sys
import numpy as np, pandas as pd

# ---------------- CONFIG ---------------- #
BINARY_OPS = ["+", "-", "*", "/", "^", "&", "|"]
N_EXPRESSIONS = 500
MAX_DEPTH = 4
OUT_PATH = "data/expressions.csv"
# ---------------------------------------- #

def _literal(rng) -> str:
    if rng.random() < 0.3:
        return f"{rng.uniform(0, 100):.2f}"
    return str(int(rng.integers(0, 20)))

def _expr(rng, depth: int) -> str:
    if depth <= 0 or rng.random() < 0.25:
        return _literal(rng)
    roll = rng.random()
    if roll < 0.1:
        return "-" + _expr(rng, depth - 1)
    if roll < 0.25:
        return "(" + _expr(rng, depth - 1) + ")"
    op = BINARY_OPS[int(rng.integers(0, len(BINARY_OPS)))]
    return _expr(rng, depth - 1) + op + _expr(rng, depth - 1)

def make_expressions(seed=0, n=N_EXPRESSIONS, max_depth=MAX_DEPTH) -> pd.Series:
    rng = np.random.default_rng(seed)
    return pd.Series([_expr(rng, max_depth) for _ in range(n)], name="expression")

if __name__ == "__main__":
    out = sys.argv[1] if len(sys.argv) > 1 else OUT_PATH
    exprs = make_expressions()
    exprs.to_frame().to_csv(out, index=False)
    print(f"{len(exprs)} expressions saved to {out}")
