"""Tests for composite policies: All, Any."""

import pytest

from arx_access import All, Any, Can, PolicyConfigError, PolicyResult


def _allow_policy(name="ok"):
    return Can(lambda *args: True, name=name)


def _deny_policy(name="no", reason="denied"):
    return Can(lambda *args: reason, name=name)


def _tracking(calls, name, value):
    def check(*args):
        calls.append(name)
        return value

    return Can(check, name=name)


# ── construction ─────────────────────────────────────────────


def test_demand_at_least_one_factor():
    with pytest.raises(PolicyConfigError, match="All demands at least one factor"):
        All()
    with pytest.raises(PolicyConfigError, match="Any demands at least one factor"):
        Any()


def test_demand_policy_factors():
    with pytest.raises(PolicyConfigError, match="demands Policy factors"):
        All(_allow_policy(), True)  # type: ignore[arg-type]


def test_names():
    assert All(_allow_policy("a"), _deny_policy("b")).name == "all(a,b)"
    assert Any(_allow_policy("a"), _deny_policy("b"), name="either").name == "either"


# ── All ──────────────────────────────────────────────────────


async def test_all_pass_returns_last_result():
    result = await All(_allow_policy("a"), _allow_policy("b")).inspect()
    assert result == PolicyResult.allow()


async def test_all_returns_first_denial():
    result = await All(_allow_policy("a"), _deny_policy("b", "first"), _deny_policy("c", "second")).inspect()
    assert not result.allowed
    assert str(result.error) == "first"


async def test_all_short_circuits():
    """If first denies, the rest should not run."""
    calls = []
    policy = All(_tracking(calls, "first", False), _tracking(calls, "second", True))
    await policy.inspect()
    assert calls == ["first"]


async def test_all_single_factor():
    assert not await All(_deny_policy()).check()
    assert await All(_allow_policy()).check()


# ── Any ──────────────────────────────────────────────────────


async def test_any_one_passes():
    result = await Any(_deny_policy("a"), _allow_policy("b")).inspect()
    assert result.allowed


async def test_any_returns_last_denial():
    result = await Any(_deny_policy("a", "first"), _deny_policy("b", "last")).inspect()
    assert not result.allowed
    assert str(result.error) == "last"


async def test_any_short_circuits():
    calls = []
    policy = Any(
        _tracking(calls, "first", False),
        _tracking(calls, "second", True),
        _tracking(calls, "third", True),
    )
    assert await policy.check()
    assert calls == ["first", "second"]


async def test_arguments_forwarded_to_every_factor():
    seen = []

    def record(*args, **kwargs):
        seen.append((args, kwargs))
        return False

    await Any(Can(record), Can(record)).inspect("alice", article=1)
    assert seen == [(("alice",), {"article": 1})] * 2


# ── nesting ──────────────────────────────────────────────────


async def test_nested_composites():
    policy = Any(
        All(_allow_policy("a"), _deny_policy("b", "inner")),
        All(_allow_policy("c"), Any(_deny_policy("d"), _allow_policy("e"))),
    )
    assert await policy.check()

    denied = Any(All(_deny_policy("x", "one")), All(_allow_policy(), _deny_policy("y", "two")))
    result = await denied.inspect()
    assert str(result.error) == "two"


async def test_authorize_raises_denial():
    with pytest.raises(Exception, match="nope"):
        await All(_allow_policy(), _deny_policy(reason="nope")).authorize()


def test_export():
    policy = Any(_allow_policy("a"), All(_deny_policy("b")))
    assert policy.export() == {
        "name": "any(a,all(b))",
        "type": "any",
        "factors": [
            {"name": "a", "type": "can"},
            {"name": "all(b)", "type": "all", "factors": [{"name": "b", "type": "can"}]},
        ],
    }
