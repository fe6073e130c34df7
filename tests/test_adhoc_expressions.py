import pytest

from kappa.types.errors import UnboundSymbol, UnexpectedEof, UnexpectedCloseParen
from kappa.types.symbol import Symbol

programs = [
    ("(+ 1 2)", 3.0),
    ("(define x 10)", 10.0),
    ("(* x x)", 100.0),
    ("(if (> 3 2) 1 0)", 1.0),
    ("((lambda (x) (* x x)) 5)", 25.0),
    ("(car (list 1 2 3))", 1.0),
    ("(define add2 (lambda (a b) (+ a b)))", None),
    ("(add2 5 7)", 12.0),
    ("(quote (a b c))", [Symbol("a"), Symbol("b"), Symbol("c")]),
    ("(cdr (list 1 2 3))", [2.0, 3.0]),
    ("(define fact (lambda (n) (if (< n 2) 1 (* n (fact (- n 1))))))", None),
    ("(fact 5)", 120.0),
    ("(define fib (lambda (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2))))))", None),
    ("(fib 15)", 610.0),
    ("(define compose (lambda (f g) (lambda (x) (f (g x)))))", None),
    ("((compose car cdr) (list 1 2 3))", 2.0),
    ("(define counter 0)", 0.0),
    ("(define tick (lambda () (begin (set! counter (+ counter 1)) counter)))", None),
    ("(tick)", 1.0),
    ("(tick)", 2.0),
    ("counter", 2.0),
    ("(define rev (lambda (xs) (if (null? xs) '() (append (rev (cdr xs)) (list (car xs))))))", None),
    ("(rev (list 1 2 3))", [3.0, 2.0, 1.0]),
    ("(map (lambda (n) (* n n)) (rev (list 1 2 3)))", [9.0, 4.0, 1.0]),
    ("(length (list pi pi))", 2.0),
]


def test_program_sequence(interp):
    for source, expected in programs:
        result = interp.eval(source)
        if expected is not None:
            assert result == expected, source


def test_several_forms_in_one_submission(interp):
    assert interp.eval_all("(define a 2) (define b 3) (* a b)") == [2.0, 3.0, 6.0]
    assert interp.eval("(define c 1) c") == [1.0, 1.0]
    assert interp.eval("; nothing") == []


def test_shadowing_does_not_leak(interp):
    interp.eval("(define x 1)")
    assert interp.eval("((lambda (x) x) 2)") == 2.0
    assert interp.eval("x") == 1.0


def test_mutation_visible_at_top_level(interp):
    interp.eval("(define x 1)")
    interp.eval("((lambda () (set! x 2)))")
    assert interp.eval("x") == 2.0


def test_malformed_input_survives(interp):
    with pytest.raises(UnboundSymbol):
        interp.eval("(y 1 2)")
    assert interp.eval("(+ 1 2)") == 3.0


def test_reader_failure_leaves_arena_untouched(interp):
    frames = len(interp.arena)
    with pytest.raises(UnexpectedEof):
        interp.eval("(define z 1) (+ 1")
    with pytest.raises(UnboundSymbol):
        interp.eval("z")
    with pytest.raises(UnexpectedCloseParen):
        interp.eval("(define z 1))")
    assert len(interp.arena) == frames
    assert interp.eval("(define z 5)") == 5.0


def test_partial_submission_keeps_completed_forms(interp):
    with pytest.raises(UnboundSymbol):
        interp.eval("(define kept 1) (missing)")
    assert interp.eval("kept") == 1.0


def test_prelude():
    from kappa.interpreter import Interpreter

    interp = Interpreter(prelude="(define sq (lambda (x) (* x x)))\n(define four (sq 2))")
    assert interp.eval("four") == 4.0


def test_load_file(interp, tmp_path):
    source = tmp_path / "prog.lisp"
    source.write_text("; a program\n(define square\n  (lambda (x)\n    (* x x)))\n(square 12)\n")
    results = interp.load(source)
    assert len(results) == 2
    assert results[-1] == 144.0
