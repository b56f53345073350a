"""Policy implementations: the ``Can`` leaf and the ``All``/``Any`` combinators."""

from arx_access.policies.base import Policy
from arx_access.policies.can import Can, PredicateFn, PredicateReturn
from arx_access.policies.composite import All, Any
from arx_access.result import PolicyResult

__all__ = [
    "All",
    "Any",
    "Can",
    "Policy",
    "PolicyResult",
    "PredicateFn",
    "PredicateReturn",
]
