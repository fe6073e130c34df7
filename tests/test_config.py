import logging

import pytest

from kappa import config
from kappa.interpreter import Interpreter
from kappa.types.errors import ArityMismatch


@pytest.mark.parametrize("raw, expected", [("0", False), ("false", False), ("OFF", False), ("1", True), ("yes", True), ("", True)])
def test_strict_arity_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("KAPPA_STRICT_ARITY", raw)
    assert config.strict_arity_from_env() is expected


def test_interpreter_reads_arity_policy_from_env(monkeypatch):
    monkeypatch.setenv("KAPPA_STRICT_ARITY", "off")
    assert Interpreter().eval("((lambda (a) a) 1 2)") == 1.0
    monkeypatch.setenv("KAPPA_STRICT_ARITY", "on")
    with pytest.raises(ArityMismatch):
        Interpreter().eval("((lambda (a) a) 1 2)")


def test_recursion_limit(monkeypatch):
    monkeypatch.delenv("KAPPA_RECURSION_LIMIT", raising=False)
    assert config.get_recursion_limit() == config.DEFAULT_RECURSION_LIMIT
    monkeypatch.setenv("KAPPA_RECURSION_LIMIT", "2500")
    assert config.get_recursion_limit() == 2500
    monkeypatch.setenv("KAPPA_RECURSION_LIMIT", "lots")
    assert config.get_recursion_limit() == config.DEFAULT_RECURSION_LIMIT


def test_log_level(monkeypatch):
    monkeypatch.delenv("LOGLEVEL", raising=False)
    assert config.get_log_level() == logging.WARNING
    monkeypatch.setenv("LOGLEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("LOGLEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING


def test_prompt_and_prelude_path(monkeypatch, tmp_path):
    monkeypatch.delenv("KAPPA_PROMPT", raising=False)
    monkeypatch.delenv("KAPPA_PRELUDE_PATH", raising=False)
    assert config.get_prompt() == "kappa> "
    assert config.get_prelude_path() is None
    monkeypatch.setenv("KAPPA_PRELUDE_PATH", str(tmp_path / "p.lisp"))
    assert config.get_prelude_path() == tmp_path / "p.lisp"
