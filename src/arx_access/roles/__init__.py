"""Hierarchical roles: the closure-table authority and the role matcher."""

from arx_access.roles.authority import HierarchicalRoleAuthority, HierarchyMapping, RoleAuthority
from arx_access.roles.matcher import RoleArg, RoleMatch, RoleMatcher, match_roles

__all__ = [
    "HierarchicalRoleAuthority",
    "HierarchyMapping",
    "RoleArg",
    "RoleAuthority",
    "RoleMatch",
    "RoleMatcher",
    "match_roles",
]
