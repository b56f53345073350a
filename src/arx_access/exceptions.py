"""Custom exceptions for the arx_access package."""

from __future__ import annotations


class ArxError(Exception):
    """Base exception for all errors raised by arx_access."""


class NotAllowedError(ArxError):
    """Default denial error produced when a predicate does not allow."""

    def __init__(self, message: str = "Not allowed") -> None:
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class PolicyConfigError(ArxError):
    """Raised when a policy, engine or hierarchy is built from bad input.

    These are programming errors surfaced at construction time, never
    authorization outcomes.
    """

    def __init__(self, policy: str, message: str) -> None:
        self.policy = policy
        super().__init__(f"{policy} {message}")


class HierarchyMappingError(ArxError):
    """Raised when a role hierarchy contains a circular reference."""

    def __init__(self, role: str, path: list[str]) -> None:
        self.role = role
        self.path = list(path)
        graphic = " > ".join(f"[{r}]" if r == role else r for r in self.path)
        super().__init__(
            f"Circular reference error: role [{role}] is backreferenced in path {graphic}"
        )
