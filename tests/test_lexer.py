
import pytest
from calc.lexer import Lexer, tokenize
from calc.tokens import Token, TokenKind, Precedence
from calc.errors import LexicalError

def kinds(src):
    return [t.kind for t in tokenize(src)]

def test_tokenize_decimal_number():
    lx = Lexer("3.14")
    assert next(lx) == Token(TokenKind.NUM, 3.14)

def test_tokenize_mixed_operators():
    toks = tokenize("2+3*4-5/2")
    assert toks == [
        Token(TokenKind.NUM, 2.0), Token(TokenKind.ADD),
        Token(TokenKind.NUM, 3.0), Token(TokenKind.MULTIPLY),
        Token(TokenKind.NUM, 4.0), Token(TokenKind.SUBTRACT),
        Token(TokenKind.NUM, 5.0), Token(TokenKind.DIVIDE),
        Token(TokenKind.NUM, 2.0), Token(TokenKind.END_OF_INPUT),
    ]

def test_tokenize_punctuation():
    assert kinds("&|^()") == [
        TokenKind.AND, TokenKind.OR, TokenKind.CARET,
        TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN, TokenKind.END_OF_INPUT,
    ]

def test_unrecognized_character_fails_lazily():
    lx = Lexer("2+3$4")
    assert next(lx) == Token(TokenKind.NUM, 2.0)
    assert next(lx) == Token(TokenKind.ADD)
    assert next(lx) == Token(TokenKind.NUM, 3.0)
    with pytest.raises(LexicalError) as err:
        next(lx)
    assert "'$'" in str(err.value)
    assert err.value.kind == "lexical"

def test_malformed_number():
    with pytest.raises(LexicalError):
        next(Lexer("1.2.3"))

def test_trailing_dot_is_a_number():
    assert next(Lexer("5.")) == Token(TokenKind.NUM, 5.0)

def test_empty_string_repeats_end_of_input():
    lx = Lexer("")
    for _ in range(3):
        assert next(lx).kind is TokenKind.END_OF_INPUT

def test_whitespace_is_skipped():
    assert tokenize("   4   +\t6 \n") == [
        Token(TokenKind.NUM, 4.0), Token(TokenKind.ADD),
        Token(TokenKind.NUM, 6.0), Token(TokenKind.END_OF_INPUT),
    ]

def test_token_precedence():
    assert Token(TokenKind.CARET).precedence is Precedence.EXPONENT
    assert Token(TokenKind.OR).precedence is Precedence.BITWISE
    assert Token(TokenKind.NUM, 1.0).precedence is Precedence.NONE
    assert Token(TokenKind.RIGHT_PAREN).precedence is Precedence.NONE
    assert Precedence.NONE < Precedence.BITWISE < Precedence.ADD_SUB \
        < Precedence.MUL_DIV < Precedence.EXPONENT < Precedence.NEGATIVE
