#!/usr/bin/env python3
"""
cli.py

Command-line front end for the arithmetic evaluator.

Usage examples:
    calc "2*3+(4-5)+2^3/4"
    calc --ast "3+2*4"
    calc --batch expressions.txt      # one expression per line
    calc                              # interactive, one expression per line until EOF
"""

import argparse
import logging
import os
import sys

import pandas as pd

from calc.ast_utils import ast_to_pretty
from calc.errors import CalcError
from calc.eval import evaluate
from calc.parser import parse_expression
from engine.batch import evaluate_series, summarize

logger = logging.getLogger("app.cli")

BANNER = """Hello! Welcome to Arithmetic expression evaluator.
You can calculate value for expression such as 2*3+(4-5)+2^3/4.
Allowed numbers: positive, negative and decimals.
Supported operations: Add, Subtract, Multiply, Divide, PowerOf(^), BitwiseAnd(&), BitwiseOr(|).
Enter your arithmetic expression below:"""

RESULT_MSG = "The computed number is {}\n"
ERROR_MSG = "Error in evaluating expression. Please enter valid expression\n"


def run_once(expr: str, show_ast: bool = False, out=None) -> bool:
    out = out or sys.stdout
    try:
        if show_ast:
            print(ast_to_pretty(parse_expression("".join(expr.split()))), file=out)
        else:
            print(RESULT_MSG.format(evaluate(expr)), file=out)
    except CalcError as e:
        logger.debug("failed: %s", e)
        print(ERROR_MSG, file=out)
        return False
    return True


def run_batch(path: str, out=None) -> bool:
    out = out or sys.stdout
    with open(path, "r", encoding="utf-8") as f:
        exprs = pd.Series([line.strip() for line in f if line.strip()])
    res = evaluate_series(exprs)
    print(res[["expression", "value", "error_kind"]].to_string(), file=out)
    stats = summarize(res)
    print(f"\n{stats['ok']}/{stats['total']} evaluated", file=out)
    return stats["ok"] == stats["total"]


def interactive(stream=None, out=None, banner=True):
    stream = stream or sys.stdin
    out = out or sys.stdout
    if banner:
        print(BANNER, file=out)
    for line in stream:
        run_once(line.strip(), out=out)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="calc", description="Evaluate arithmetic expressions.")
    ap.add_argument("expr", nargs="*", help="Expression to evaluate; words are joined with spaces.")
    ap.add_argument("--ast", action="store_true", help="Print the parse tree instead of the value.")
    ap.add_argument("--batch", type=str, default=None, help="File with one expression per line.")
    ap.add_argument("--log-level", type=str, default=os.environ.get("CALC_LOG_LEVEL", "WARNING"))
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.batch:
        try:
            return 0 if run_batch(args.batch) else 1
        except OSError as e:
            print(f"Could not read {args.batch}: {e.strerror or e}", file=sys.stderr)
            return 1
    if args.ast:
        return 0 if run_once(" ".join(args.expr), show_ast=True) else 1
    print(BANNER)
    if args.expr:
        return 0 if run_once(" ".join(args.expr)) else 1
    interactive(banner=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
