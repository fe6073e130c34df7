import pytest

from kappa.types.errors import ArityMismatch, TypeMismatch
from kappa.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2 3)", [1.0, 2.0, 3.0]),
        ("(list)", []),
        ("(car (list 1 2 3))", 1.0),
        ("(cdr (list 1 2 3))", [2.0, 3.0]),
        ("(cdr (list 1))", []),
        ("(cdr '())", []),
        ("(cons 1 (list 2 3))", [1.0, 2.0, 3.0]),
        ("(cons (list 1) '())", [[1.0]]),
        ("(append (list 1 2) (list 3) '() (list 4))", [1.0, 2.0, 3.0, 4.0]),
        ("(append)", []),
        ("(length (list 1 2 3))", 3.0),
        ("(length '())", 0.0),
        ("(null? '())", True),
        ("(null? (list 1))", False),
        ("(null? 0)", False),
        ("(list? (list))", True),
        ("(list? 'a)", False),
        ("(car '((a b) c))", [Symbol("a"), Symbol("b")]),
    ]
)
def test_list_operations(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize(
    "source",
    ["(car '())", "(car 1)", "(cdr 'a)", "(cons 1 2)", "(append (list 1) 2)", "(length \"abc\")"],
)
def test_list_type_mismatch(interp, source):
    with pytest.raises(TypeMismatch):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(car)", "(cons 1)", "(length '() '())", "(null?)"])
def test_list_arity(interp, source):
    with pytest.raises(ArityMismatch):
        interp.eval(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(equal? 1 1)", True),
        ("(equal? 1 2)", False),
        ("(equal? 'a 'a)", True),
        ('(equal? "a" "a")', True),
        ('(equal? "a" (quote a))', False),
        ("(equal? (list 1 (list 2)) (list 1 (list 2)))", True),
        ("(equal? (list 1 2) (list 1))", False),
        ("(equal? '() '())", True),
        ("(equal? #t #t)", True),
        ("(equal? #t 1)", False),
        ("(equal? 1+2i 1+2i)", True),
        ("(equal? car car)", False),
        ("(begin (define f (lambda (x) x)) (equal? f f))", False),
    ]
)
def test_equal(interp, source, expected):
    assert interp.eval(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(number? 1)", True),
        ("(number? 1+2i)", False),
        ("(number? 'a)", False),
        ("(symbol? 'a)", True),
        ('(symbol? "a")', False),
        ("(procedure? car)", True),
        ("(procedure? (lambda (x) x))", True),
        ("(procedure? '(lambda (x) x))", False),
        ("(not #f)", True),
        ("(not (list 1))", False),
        ("(not '())", True),
    ]
)
def test_predicates(interp, source, expected):
    assert interp.eval(source) is expected


def test_not_rejects_numbers(interp):
    with pytest.raises(TypeMismatch):
        interp.eval("(not 0)")


def test_begin_returns_last(interp):
    assert interp.eval("(begin 1 2 3)") == 3.0
    assert interp.eval("(begin (define a 4) (* a 2))") == 8.0
    with pytest.raises(ArityMismatch):
        interp.eval("(begin)")
