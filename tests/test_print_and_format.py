import math

import pytest

from kappa.printer import to_string, format_number
from kappa.types.symbol import Symbol


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "#t"),
        (False, "#f"),
        (Symbol("abc"), "abc"),
        (3.0, "3"),
        (-2.0, "-2"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e20, "1e+20"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
        (complex(1, 2), "1+2i"),
        (complex(1.5, -2), "1.5-2i"),
        ("text", '"text"'),
        ("a\\nb", '"a\\nb"'),
        ([], "()"),
        ([1.0, [Symbol("a"), "s"], True], '(1 (a "s") #t)'),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_negative_zero():
    assert format_number(-0.0) == "-0"


def test_procedures_render_opaquely(interp):
    assert to_string(interp.eval("car")) == "<function>"
    assert to_string(interp.eval("(lambda (x) x)")) == "<procedure>"


def test_lambda_str(interp):
    assert str(interp.eval("(lambda (a b) (+ a b))")) == "(lambda (a b) (+ a b))"


def test_render_submission(interp):
    assert interp.render("(define x 10) (* x x) 'sym (list 1 \"two\")") == ["10", "100", "sym", '(1 "two")']


def test_print_outputs_and_returns_empty_list(interp, capsys):
    ret = interp.eval('(print "alpha" 42 (quote beta) (list 1 2))')
    out = capsys.readouterr().out
    assert out == '"alpha" 42 beta (1 2)\n'
    assert ret == []


def test_print_builtin_directly(arena_root, capsys):
    arena, root = arena_root
    pr = arena.resolve(root, Symbol("print"))
    assert pr(arena, [1.0, True]) == []
    assert capsys.readouterr().out == "1 #t\n"
