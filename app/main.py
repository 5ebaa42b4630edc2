import logging
import math
import os
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from calc.analyzer import analyze
from calc.ast_utils import ast_to_dict, ast_to_pretty, tree_depth
from calc.errors import CalcError
from calc.eval import eval_node
from calc.parser import parse_expression
from calc.tokens import list_operators
from engine.batch import evaluate_series, summarize

logging.basicConfig(
    level=os.environ.get("CALC_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("app.main")

MAX_BATCH = int(os.environ.get("CALC_MAX_BATCH", "1000"))
MAX_AST_DEPTH = int(os.environ.get("CALC_MAX_AST_DEPTH", "200"))

app = FastAPI(title="Arithmetic Expression Evaluator")

class ExprBody(BaseModel):
    expr: str

class BatchBody(BaseModel):
    exprs: List[str]


def _number(x: float):
    # JSON has no nan/inf
    if math.isfinite(x):
        return x
    return str(x)

def _bad_request(e: CalcError):
    logger.info("rejected expression: %s", e)
    return HTTPException(status_code=400, detail=e.to_dict())

def _strip(expr: str) -> str:
    return "".join(expr.split())


@app.get("/operators")
def operators():
    return {"operators": list_operators()}

@app.post("/parse")
def parse(body: ExprBody):
    try:
        ast = parse_expression(_strip(body.expr))
    except CalcError as e:
        raise _bad_request(e)
    meta = analyze(ast)
    return {
        "ok": True,
        "operators": sorted(meta.operators),
        "literals": [_number(v) for v in meta.literals],
        "depth": meta.depth,
    }

@app.post("/evaluate")
def evaluate(body: ExprBody):
    try:
        ast = parse_expression(_strip(body.expr))
        out = eval_node(ast)
    except CalcError as e:
        raise _bad_request(e)
    return {"expr": body.expr, "result": _number(out)}

@app.post("/evaluate_batch")
def evaluate_batch(body: BatchBody):
    if len(body.exprs) > MAX_BATCH:
        raise HTTPException(status_code=413, detail=f"at most {MAX_BATCH} expressions per request")
    out = evaluate_series(body.exprs)
    rows = []
    for rec in out.to_dict(orient="records"):
        rec["value"] = _number(rec["value"]) if rec["ok"] else None
        rec["ok"] = bool(rec["ok"])
        rows.append(rec)
    return {"results": rows, "summary": summarize(out)}

@app.post("/ast")
def ast_view(body: ExprBody):
    try:
        ast = parse_expression(_strip(body.expr))
    except CalcError as e:
        raise _bad_request(e)
    depth = tree_depth(ast)
    # nested JSON encoding recurses once per level
    tree = ast_to_dict(ast) if depth <= MAX_AST_DEPTH else None
    return {
        "ok": True,
        "depth": depth,
        "pretty": ast_to_pretty(ast),
        "tree": tree,
    }
