"""arx_access — composable authorization policies and hierarchical roles.

Policies are built from predicates and combined with short-circuiting
``all``/``any``.  Every evaluation yields a :class:`PolicyResult` whose
``error`` explains a denial.  Role hierarchies compile into closure tables
that a :class:`RoleMatcher` queries.
"""

from arx_access.access_control import AccessControl, Factor
from arx_access.exceptions import (
    ArxError,
    HierarchyMappingError,
    NotAllowedError,
    PolicyConfigError,
)
from arx_access.policies import All, Any, Can, Policy
from arx_access.result import PolicyResult
from arx_access.roles import (
    HierarchicalRoleAuthority,
    RoleAuthority,
    RoleMatch,
    RoleMatcher,
    match_roles,
)
from arx_access.settings import AccessControlSettings

__all__ = [
    "AccessControl",
    "AccessControlSettings",
    "All",
    "Any",
    "ArxError",
    "Can",
    "Factor",
    "HierarchicalRoleAuthority",
    "HierarchyMappingError",
    "NotAllowedError",
    "Policy",
    "PolicyConfigError",
    "PolicyResult",
    "RoleAuthority",
    "RoleMatch",
    "RoleMatcher",
    "match_roles",
]
