import pytest

from kappa.builtin.env_builtin import register
from kappa.interpreter import Interpreter
from kappa.runtime_context import get_strict_arity, set_strict_arity
from kappa.types.environment import EnvironmentArena


@pytest.fixture
def interp():
    """Fresh interpreter with builtins in the root frame and no prelude."""
    return Interpreter(strict_arity=True)


@pytest.fixture
def arena_root():
    """A bare arena whose root frame holds the builtins; returns (arena, root_id)."""
    arena = EnvironmentArena()
    root = arena.create_root()
    register(arena, root)
    return arena, root


@pytest.fixture(autouse=True)
def _restore_strict_arity():
    # the arity policy is process-global; keep tests independent of each other
    saved = get_strict_arity()
    set_strict_arity(True)
    yield
    set_strict_arity(saved)
