"""Composite policies — boolean combinators for composing policies."""

from __future__ import annotations

import logging
import typing

from arx_access.exceptions import PolicyConfigError
from arx_access.policies.base import Policy
from arx_access.result import PolicyResult

logger = logging.getLogger(__name__)


class _Composite(Policy):
    def __init__(self, *policies: Policy, name: str = "") -> None:
        if len(policies) < 1:
            raise PolicyConfigError(type(self).__name__, "demands at least one factor")
        for p in policies:
            if not isinstance(p, Policy):
                raise PolicyConfigError(
                    type(self).__name__,
                    f"demands Policy factors, got {type(p).__name__}",
                )
        self._policies = list(policies)
        self._name = name or f"{self._policy_type}({','.join(p.name for p in self._policies)})"

    @property
    def name(self) -> str:
        return self._name

    def export(self) -> dict[str, typing.Any]:
        data = super().export()
        data["factors"] = [p.export() for p in self._policies]
        return data


class All(_Composite):
    """Passes only if **all** factors pass.  Short-circuits on first denial.

    Returns the first denial, or the last factor's result when every
    factor allows.
    """

    _policy_type = "all"

    async def inspect(self, *args: typing.Any, **kwargs: typing.Any) -> PolicyResult:
        for p in self._policies:
            result = await p.inspect(*args, **kwargs)
            if not result.allowed:
                logger.debug("Policy '%s' short-circuited on '%s'", self.name, p.name)
                return result
        return result


class Any(_Composite):
    """Passes if **at least one** factor passes.

    Returns the first allowing result, or the *last* denial when every
    factor denies.
    """

    _policy_type = "any"

    async def inspect(self, *args: typing.Any, **kwargs: typing.Any) -> PolicyResult:
        for p in self._policies:
            result = await p.inspect(*args, **kwargs)
            if result.allowed:
                logger.debug("Policy '%s' short-circuited on '%s'", self.name, p.name)
                return result
        return result
