"""Validated configuration objects.

These Pydantic models define what an :class:`~arx_access.AccessControl`
engine and a role hierarchy accept at construction time.  Validation
failures surface as :class:`~arx_access.exceptions.PolicyConfigError`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from arx_access.exceptions import PolicyConfigError

PreformatErrorFn = Callable[[str | None], Exception]
FormatErrorFn = Callable[[Exception], Exception]

RoleHierarchyRepresentation = dict[str, list[str]]

# Numeric roles such as ``{1: [2]}`` are accepted and become strings.
_hierarchy_adapter: TypeAdapter[RoleHierarchyRepresentation] = TypeAdapter(
    RoleHierarchyRepresentation,
    config=ConfigDict(coerce_numbers_to_str=True),
)


class AccessControlSettings(BaseModel):
    """Error-formatting hooks bound into every leaf policy an engine creates.

    Attributes:
        preformat_error: Builds the denial error from an optional message
                         when a predicate returns a string or a falsy value.
        format_error:    Post-processes every concrete denial error before
                         it is placed in the result.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    preformat_error: PreformatErrorFn | None = None
    format_error: FormatErrorFn | None = None

    def merge(self, overrides: Mapping[str, Any]) -> AccessControlSettings:
        """Return new settings with the non-``None`` *overrides* applied."""
        data = dict(self)
        data.update({k: v for k, v in overrides.items() if v is not None})
        return load_settings(data)


def load_settings(
    settings: AccessControlSettings | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> AccessControlSettings:
    """Validate *settings* (model, mapping or ``None``) plus keyword overrides."""
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if isinstance(settings, AccessControlSettings):
        return settings.merge(overrides) if overrides else settings

    data: dict[str, Any] = {}
    if settings is not None:
        if not isinstance(settings, Mapping):
            raise PolicyConfigError(
                "AccessControl",
                f"demands a settings mapping, got {type(settings).__name__}",
            )
        data.update(settings)
    data.update(overrides)

    try:
        return AccessControlSettings.model_validate(data)
    except ValidationError as e:
        raise PolicyConfigError("AccessControl", f"received malformed settings: {e}") from e


def load_hierarchy(representation: Any) -> RoleHierarchyRepresentation:
    """Validate a ``role -> direct children`` mapping."""
    try:
        return _hierarchy_adapter.validate_python(representation)
    except ValidationError as e:
        raise PolicyConfigError(
            "HierarchicalRoleAuthority", f"received a malformed hierarchy: {e}"
        ) from e
