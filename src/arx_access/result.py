"""PolicyResult — the outcome of evaluating a policy."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PolicyResult:
    """Immutable result returned by a policy's ``inspect``.

    Attributes:
        allowed: ``True`` if the policy permits the request.
        error:   The denial error, or ``None`` when allowed.

    ``allowed`` is always equivalent to ``error is None``.
    """

    allowed: bool
    error: Exception | None = None

    def __post_init__(self) -> None:
        if self.allowed != (self.error is None):
            raise ValueError("PolicyResult.allowed must be True exactly when error is None")

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def allow() -> PolicyResult:
        return PolicyResult(allowed=True, error=None)

    @staticmethod
    def deny(error: Exception) -> PolicyResult:
        return PolicyResult(allowed=False, error=error)

    @staticmethod
    def from_error(error: Exception | None) -> PolicyResult:
        return PolicyResult(allowed=error is None, error=error)


def is_policy_result(value: Any) -> bool:
    """Return ``True`` if *value* has the shape of a :class:`PolicyResult`.

    Any object (or mapping) whose ``allowed`` is a bool and whose ``error``
    is an exception or ``None`` qualifies.
    """
    if isinstance(value, PolicyResult):
        return True
    if isinstance(value, Mapping):
        if not isinstance(value.get("allowed"), bool) or "error" not in value:
            return False
        error = value["error"]
    else:
        allowed = getattr(value, "allowed", None)
        if not isinstance(allowed, bool) or not hasattr(value, "error"):
            return False
        error = value.error
    return error is None or isinstance(error, Exception)


def result_error(value: Any) -> Exception | None:
    """Return the ``error`` of a :class:`PolicyResult`-shaped *value*."""
    if isinstance(value, Mapping):
        return value["error"]
    return value.error
