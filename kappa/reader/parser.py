"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing: physical lines are pulled only when the current one
  runs out of tokens, so a form may span several lines.
- Emits Python primitives instead of Cons cells:

    - #t / #f -> bool
    - lists -> Python list
    - symbols -> Symbol
    - strings -> str (quotes stripped, escapes kept verbatim)
    - real numbers -> float
    - complex numbers -> complex (1+2i, -3.5i, 2e3-1j)
    - quote forms -> [Symbol("quote"), expr], etc.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from kappa import SExpression
from kappa.types.errors import UnexpectedCloseParen, UnexpectedEof, UnterminatedString
from kappa.types.symbol import Symbol

Token = tuple[str, str]

WHITESPACE_RE = re.compile(r"\s*")

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<unquote>,@|,)"  # , and ,@
    r"|(?P<quote>['`])"  # ' and `
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"\n])*")'  # double-quoted strings, one line
    r'|(?P<open_string>"[^\n]*)'  # a quote that never closes
    r'|(?P<symbol>[^\s()"`,;]+)'  # fallback: any other run
)

_NUM = r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_NAMED = r"(?i:inf|infinity|nan)"

REAL_RE = re.compile(rf"[+-]?(?:{_NUM}|{_NAMED})")

# inf/nan parts only in the two-part form, so `infi` stays a symbol
COMPLEX_RE = re.compile(
    rf"(?:(?P<real>[+-]?(?:{_NUM}|{_NAMED}))(?P<imag>[+-](?:{_NUM}|{_NAMED}))"
    rf"|(?P<pure>[+-]?{_NUM}))[ij]"
)

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    ",": Symbol("unquote"),
    ",@": Symbol("unquote-splicing"),
}


class InPort:
    """Hands out tokens from a sequence of physical lines, one line at a time."""

    def __init__(self, lines: Iterable[str]):
        self.lines: Iterator[str] = iter(lines)
        self.line = ""
        self.pos = 0
        self.line_no = 0

    def next_token(self) -> Optional[Token]:
        while True:
            self.pos = WHITESPACE_RE.match(self.line, self.pos).end()
            if self.pos >= len(self.line):
                line = next(self.lines, None)
                if line is None:
                    return None
                self.line, self.pos = line, 0
                self.line_no += 1
                continue

            m = TOKEN_RE.match(self.line, self.pos)
            self.pos = m.end()
            kind = m.lastgroup
            if kind == "comment":
                continue
            if kind == "open_string":
                raise UnterminatedString(m.group(kind), self.line_no)
            return kind, m.group(kind)


def lex(source: str | Iterable[str]) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    lines = source.splitlines(keepends=True) if isinstance(source, str) else source
    port = InPort(lines)
    while (token := port.next_token()) is not None:
        yield token


def atom(token: str) -> SExpression:
    """Classify a non-paren, non-quote token: bool, string, real, complex, then symbol."""
    if token == "#t":
        return True
    if token == "#f":
        return False
    if token.startswith('"'):
        return token[1:-1]
    if REAL_RE.fullmatch(token):
        return float(token)
    m = COMPLEX_RE.fullmatch(token)
    if m:
        if m.group("pure") is not None:
            return complex(0.0, float(m.group("pure")))
        return complex(float(m.group("real")), float(m.group("imag")))
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Read one expression; None once the stream is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise UnexpectedEof("end of input before matching ')'")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise UnexpectedCloseParen()

        # Quote forms
        if tok_type in ("quote", "unquote"):
            expr = self.parse_expr()
            if expr is None:
                raise UnexpectedEof(f"end of input after {tok_val}")
            return [QUOTE_FORMS[tok_val], expr]

        return atom(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str | Iterable[str]) -> SExpression:
    """Read the first expression of `source` (None if there is none)."""
    return TokenStream(lex(source)).parse_expr()


def parse_many(source: str | Iterable[str]) -> list[SExpression]:
    return list(TokenStream(lex(source)).parse_all())
