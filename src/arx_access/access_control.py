"""AccessControl — the configuration-scoped policy factory."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from arx_access.policies.base import Policy
from arx_access.policies.can import Can, PredicateFn, PredicateReturn
from arx_access.policies.composite import All
from arx_access.policies.composite import Any as AnyOf
from arx_access.settings import AccessControlSettings, load_settings

if TYPE_CHECKING:
    from arx_access.settings import FormatErrorFn, PreformatErrorFn

# Anything accepted where a policy is expected in ``all``/``any``.
Factor = Policy | PredicateFn | PredicateReturn


def _constant(value: Any) -> PredicateFn:
    def constant(*args: Any, **kwargs: Any) -> Any:
        return value

    return constant


class AccessControl:
    """Builds policies that share one set of error-formatting hooks.

    Every leaf created through :meth:`can` (directly or by normalizing a
    factor) gets this engine's ``preformat_error`` and ``format_error``.
    Policies from different engines may be nested freely; each leaf keeps
    the hooks of the engine that created it.

    Parameters:
        settings: An :class:`AccessControlSettings`, a plain mapping, or
                  ``None``.  Keyword arguments override individual hooks.
    """

    def __init__(
        self,
        settings: AccessControlSettings | Mapping[str, Any] | None = None,
        *,
        preformat_error: PreformatErrorFn | None = None,
        format_error: FormatErrorFn | None = None,
    ) -> None:
        self._settings = load_settings(
            settings,
            preformat_error=preformat_error,
            format_error=format_error,
        )
        self._allow = self.can(_constant(True), name="allow")
        self._deny = self.can(_constant(False), name="deny")

    @property
    def settings(self) -> AccessControlSettings:
        return self._settings

    # ── leaves ───────────────────────────────────────────────

    def can(
        self,
        fn: PredicateFn,
        *,
        preformat_error: PreformatErrorFn | None = None,
        format_error: FormatErrorFn | None = None,
        name: str = "",
    ) -> Policy:
        """Wrap *fn* as a leaf policy bound to this engine's hooks.

        ``preformat_error`` / ``format_error`` override the engine's hooks
        for this leaf only.
        """
        settings = self._settings
        if preformat_error is not None or format_error is not None:
            settings = settings.merge(
                {"preformat_error": preformat_error, "format_error": format_error}
            )
        return Can(
            fn,
            preformat_error=settings.preformat_error,
            format_error=settings.format_error,
            name=name,
        )

    def allow(self) -> Policy:
        """Return this engine's always-allowing leaf."""
        return self._allow

    def deny(self, error: str | Exception | None = None) -> Policy:
        """Return a leaf that always denies.

        Without *error* the engine's shared leaf is returned and denies with
        the default error.  A string becomes the denial message; an
        exception is used verbatim.
        """
        if error is None:
            return self._deny
        return self.can(_constant(error), name="deny")

    # ── composites ───────────────────────────────────────────

    def all(self, *factors: Factor) -> Policy:
        """AND the *factors*: first denial wins."""
        return All(*self._normalize_factors(factors))

    def any(self, *factors: Factor) -> Policy:
        """OR the *factors*: first allow wins, else the last denial."""
        return AnyOf(*self._normalize_factors(factors))

    def _normalize_factors(self, factors: tuple[Factor, ...]) -> list[Policy]:
        policies: list[Policy] = []
        for f in factors:
            if isinstance(f, Policy):
                policies.append(f)
            elif callable(f):
                policies.append(self.can(f))
            else:
                policies.append(self.can(_constant(f), name=repr(f)))
        return policies
