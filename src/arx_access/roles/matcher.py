"""RoleMatcher — checks required roles against granted roles through an authority."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import asdict, dataclass, field
from typing import Any

from arx_access.roles.authority import HierarchicalRoleAuthority, RoleAuthority
from arx_access.settings import RoleHierarchyRepresentation

# A single role, several roles, or nothing at all.
RoleArg = str | Iterable[str | None] | None


def _roles(value: RoleArg) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    return [role for role in value if role is not None and role != ""]


@dataclass(frozen=True)
class RoleMatch:
    """Outcome of :meth:`RoleMatcher.match`.

    Attributes:
        any:       At least one required role is reachable.
        all:       Every required role is reachable (never true for an
                   empty requirement).
        matches:   The required roles that are reachable, in required order.
        required:  The filtered required roles.
        granted:   The filtered granted roles.
        reachable: Granted roles plus everything they imply.
    """

    any: bool
    all: bool
    matches: list[str] = field(default_factory=list)
    required: list[str] = field(default_factory=list)
    granted: list[str] = field(default_factory=list)
    reachable: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class RoleMatcher:
    """Matches required roles against granted roles.

    Granted roles always reach themselves, even when the authority knows
    nothing about them.
    """

    def __init__(self, role_authority: RoleAuthority) -> None:
        self._role_authority = role_authority

    def get_reachable_roles(self, granted_roles: RoleArg) -> list[str]:
        return self._role_authority.get_reachable_roles(_roles(granted_roles))

    def match(self, required_roles: RoleArg, granted_roles: RoleArg) -> RoleMatch:
        required = _roles(required_roles)
        granted = _roles(granted_roles)

        reachable = list(
            dict.fromkeys(self._role_authority.get_reachable_roles(granted) + granted)
        )
        matches = [role for role in required if role in reachable]

        any_matched = len(matches) > 0
        # an empty requirement must not match vacuously
        all_matched = all(role in matches for role in required) and any_matched

        return RoleMatch(
            any=any_matched,
            all=all_matched,
            matches=matches,
            required=required,
            granted=granted,
            reachable=reachable,
        )


def match_roles(
    representation: RoleHierarchyRepresentation,
) -> Callable[[RoleArg, RoleArg], RoleMatch]:
    """Return a ``match(required, granted)`` function over *representation*."""
    return RoleMatcher(HierarchicalRoleAuthority(representation)).match
