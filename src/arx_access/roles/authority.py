"""HierarchicalRoleAuthority — compiles a role implication graph into a closure table."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from arx_access.exceptions import HierarchyMappingError
from arx_access.settings import RoleHierarchyRepresentation, load_hierarchy

logger = logging.getLogger(__name__)

HierarchyMapping = dict[str, list[str]]


class RoleAuthority(Protocol):
    """Anything able to expand granted roles into every role they imply."""

    def get_reachable_roles(self, granted_roles: Iterable[str]) -> list[str]: ...


class HierarchicalRoleAuthority:
    """Answers role implication queries from a ``role -> children`` hierarchy.

    The representation maps each role to the roles it directly implies, e.g.
    ``{"admin": ["moderator", "writer"], "moderator": ["reader"]}``.  It is
    compiled once into a mapping where every role (keys and referenced
    children alike) lists itself followed by all the roles it transitively
    implies, deduplicated in first-discovery order.

    Raises:
        HierarchyMappingError: The hierarchy contains a circular reference.
        PolicyConfigError:     The representation is malformed.
    """

    def __init__(self, representation: RoleHierarchyRepresentation) -> None:
        self._mapping: HierarchyMapping = self._map(representation)

    def set_hierarchy(self, representation: RoleHierarchyRepresentation) -> None:
        """Replace the hierarchy.  The old mapping is kept if compilation fails."""
        self._mapping = self._map(representation)

    def get_mapping(self) -> HierarchyMapping:
        """Return a snapshot of the compiled mapping."""
        return {role: list(implied) for role, implied in self._mapping.items()}

    def lookup(self, role: str) -> list[str]:
        """Return *role* and every role it implies, or ``[]`` if unknown."""
        return list(self._mapping.get(role, []))

    def get_reachable_roles(self, granted_roles: Iterable[str]) -> list[str]:
        reachable: dict[str, None] = {}
        for granted in granted_roles:
            reachable.update(dict.fromkeys(self._mapping.get(granted, [])))
        return list(reachable)

    @staticmethod
    def _map(representation: Any) -> HierarchyMapping:
        hierarchy = load_hierarchy(representation)
        mapping: HierarchyMapping = {}
        resolved: set[str] = set()

        def traverse(role: str, path: list[str]) -> list[str]:
            if role in path:
                raise HierarchyMappingError(role, [*path, role])

            implied = mapping.setdefault(role, [role])
            if role in resolved:
                return implied

            children = hierarchy.get(role, [])
            path = [*path, role]
            for child in children:
                if child not in implied:
                    implied.append(child)
            for child in children:
                for sub in traverse(child, path):
                    if sub not in implied:
                        implied.append(sub)

            resolved.add(role)
            return implied

        for role in hierarchy:
            traverse(role, [])

        logger.debug("Compiled role hierarchy with %d roles", len(mapping))
        return mapping
