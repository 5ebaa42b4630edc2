
import pytest
from calc.parser import parse_expression, Parser, Number, UnaryOp, BinOp
from calc.ast_utils import ast_to_infix, ast_to_dict, ast_to_pretty
from calc.analyzer import analyze
from calc.errors import CalcError, LexicalError, ParseError

def N(v):
    return Number(float(v))

@pytest.mark.parametrize("src", [
    "1+2*3",
    "2*3+(4-5)+2^3/4",
    "-(-(1))",
    "6|2&1",
    "1.5^0.5",
    "((((7))))",
])
def test_parse_ok(src):
    ast = parse_expression(src)
    assert ast is not None

def test_parse_exponentiation():
    assert parse_expression("2^3") == BinOp("^", N(2), N(3))

def test_parse_complex_expression():
    assert parse_expression("3+2*4") == BinOp("+", N(3), BinOp("*", N(2), N(4)))

def test_parse_bitwise_or():
    assert parse_expression("6|2") == BinOp("|", N(6), N(2))

def test_parse_negative_number():
    assert parse_expression("-5") == UnaryOp("-", N(5))

def test_parse_parentheses():
    assert parse_expression("(2+3)") == BinOp("+", N(2), N(3))

@pytest.mark.parametrize("src,grouped", [
    ("10-4-3", "((10.0 - 4.0) - 3.0)"),
    ("8/4/2", "((8.0 / 4.0) / 2.0)"),
    ("2^3^2", "((2.0 ^ 3.0) ^ 2.0)"),
    ("-2^2", "((-2.0) ^ 2.0)"),
    ("1|2+3", "(1.0 | (2.0 + 3.0))"),
    ("1+2*3^2", "(1.0 + (2.0 * (3.0 ^ 2.0)))"),
    ("2*-3", "(2.0 * (-3.0))"),
])
def test_precedence_and_grouping(src, grouped):
    assert ast_to_infix(parse_expression(src)) == grouped

def test_trailing_tokens_are_ignored():
    assert parse_expression("(2+3)4") == BinOp("+", N(2), N(3))
    assert parse_expression("2)") == N(2)

@pytest.mark.parametrize("src", ["(2+3", "", "2+", "*3", "()", "2*(3+"])
def test_syntax_errors(src):
    with pytest.raises(ParseError) as err:
        parse_expression(src)
    assert err.value.kind == "syntax"

def test_unbalanced_paren_message():
    with pytest.raises(ParseError, match="Expected"):
        parse_expression("(2+3")

def test_invalid_leading_character_fails_construction():
    with pytest.raises(LexicalError):
        Parser("$1")

def test_invalid_character_mid_expression():
    with pytest.raises(CalcError):
        parse_expression("2+3$4")

def test_parse_is_deterministic():
    src = "2*3+(4-5)+2^3/4"
    assert parse_expression(src) == parse_expression(src)

def test_ast_views():
    ast = parse_expression("3+-2")
    assert ast_to_dict(ast) == {
        "type": "BinOp", "op": "+",
        "left": {"type": "Number", "value": 3.0},
        "right": {"type": "UnaryOp", "op": "-", "operand": {"type": "Number", "value": 2.0}},
    }
    assert ast_to_pretty(ast).splitlines() == [
        "BinOp(+)",
        "  left: Number(3.0)",
        "  right: UnaryOp(-)",
        "    operand: Number(2.0)",
    ]

def test_analyze():
    an = analyze(parse_expression("3+2*-4"))
    assert an.operators == {"+", "*", "neg"}
    assert an.literals == [3.0, 2.0, 4.0]
    assert an.depth == 4
    assert an.nodes == 6

def test_views_handle_long_chains():
    ast = parse_expression("+".join(["1"] * 1500))
    an = analyze(ast)
    assert an.depth == 1500
    assert an.nodes == 2999
    assert an.literals == [1.0] * 1500
    lines = ast_to_pretty(ast).splitlines()
    assert len(lines) == 2999
    assert lines[-1].strip() == "right: Number(1.0)"
    assert ast_to_infix(ast).count("+") == 1499
    assert ast_to_dict(ast)["type"] == "BinOp"
