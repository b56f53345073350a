"""Shared test fixtures."""

import pytest

from arx_access import AccessControl, HierarchicalRoleAuthority, RoleMatcher


@pytest.fixture
def ac():
    return AccessControl()


@pytest.fixture
def hierarchy():
    return {
        "a": ["b", "c"],
        "b": ["d"],
        "c": ["d"],
        "d": ["e"],
    }


@pytest.fixture
def matcher(hierarchy):
    return RoleMatcher(HierarchicalRoleAuthority(hierarchy))
