"""Policy ABC — the single abstraction that leaves and composites implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from arx_access.result import PolicyResult


class Policy(ABC):
    """Base class for every policy.

    Subclasses implement ``inspect``; ``check`` and ``authorize`` are built
    on top of it:

    * ``inspect`` returns the full :class:`PolicyResult`.
    * ``check`` returns only the ``allowed`` flag and never raises a denial.
    * ``authorize`` returns ``True`` or raises the denial error itself.

    Class Variables:
        _policy_type: Type identifier used by ``export`` (e.g. ``"can"``).
    """

    _policy_type: ClassVar[str] = "base"

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable identifier for this policy instance."""
        ...

    @abstractmethod
    async def inspect(self, *args: Any, **kwargs: Any) -> PolicyResult:
        """Evaluate the policy against the given arguments."""
        ...

    async def check(self, *args: Any, **kwargs: Any) -> bool:
        result = await self.inspect(*args, **kwargs)
        return result.allowed

    async def authorize(self, *args: Any, **kwargs: Any) -> bool:
        result = await self.inspect(*args, **kwargs)
        error = result.error
        if error is not None:
            raise error.with_traceback(None)
        return True

    # ── introspection ─────────────────────────────────────────

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of this policy.

        Composite subclasses call ``super().export()`` and add their
        ``"factors"``.
        """
        return {
            "name": self.name,
            "type": self._policy_type,
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
