"""Can — the leaf policy wrapping a single predicate."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from arx_access.exceptions import NotAllowedError, PolicyConfigError
from arx_access.policies.base import Policy
from arx_access.result import PolicyResult, is_policy_result, result_error

logger = logging.getLogger(__name__)

# What a predicate may return.  Anything else is treated as a denial.
PredicateReturn = bool | str | Exception | PolicyResult | None

# The predicate can be sync or async.
PredicateFn = Callable[..., PredicateReturn] | Callable[..., Awaitable[PredicateReturn]]


def default_preformat_error(message: str | None = None) -> Exception:
    return NotAllowedError(message if message is not None else "Not allowed")


def default_format_error(error: Exception) -> Exception:
    return error


class Can(Policy):
    """Wraps a predicate as a policy.

    The predicate's return value is normalized into a denial error (or
    ``None``) with this precedence:

    1. ``True`` allows.
    2. An exception instance is used as the denial error as is.
    3. A :class:`PolicyResult`-shaped object or mapping contributes its ``error``.
    4. A string becomes the message passed to ``preformat_error``.
    5. Anything else denies via ``preformat_error(None)``.

    Any concrete error then goes through ``format_error``, including errors
    surfaced from a delegated ``PolicyResult``.

    Parameters:
        fn:              Predicate receiving the arguments given to ``inspect``.
        preformat_error: ``(message | None) -> Exception``.
        format_error:    ``(Exception) -> Exception``.
        name:            Defaults to the predicate's ``__name__``.
    """

    _policy_type = "can"

    def __init__(
        self,
        fn: PredicateFn,
        *,
        preformat_error: Callable[[str | None], Exception] | None = None,
        format_error: Callable[[Exception], Exception] | None = None,
        name: str = "",
    ) -> None:
        if not callable(fn):
            raise PolicyConfigError("Can", "demands a function as argument")

        self._fn = fn
        self._preformat_error = preformat_error or default_preformat_error
        self._format_error = format_error or default_format_error
        self._name = name or getattr(fn, "__name__", type(fn).__name__)

    @property
    def name(self) -> str:
        return self._name

    def _normalize(self, result: Any) -> Exception | None:
        if result is True:
            return None
        if isinstance(result, Exception):
            return result
        if is_policy_result(result):
            return result_error(result)
        if isinstance(result, str):
            return self._preformat_error(result)
        return self._preformat_error(None)

    async def inspect(self, *args: Any, **kwargs: Any) -> PolicyResult:
        result = self._fn(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result

        error = self._normalize(result)
        if error is not None:
            error = self._format_error(error)
            logger.debug("Policy '%s' denied: %r", self.name, error)

        return PolicyResult.from_error(error)
