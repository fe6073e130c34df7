from __future__ import annotations

from kappa.config import strict_arity_from_env

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_strict_arity: bool = strict_arity_from_env()


def set_strict_arity(flag: bool) -> None:
    global _strict_arity
    _strict_arity = flag


def get_strict_arity() -> bool:
    return _strict_arity
