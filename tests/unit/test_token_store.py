"""Test token caching, expiry margin and single-flight refresh"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from dceapi.exceptions import AuthError
from dceapi.token_store import Token, TokenStore
from tests.factories import make_token


class CountingAuthenticator:
    """Issues token-1, token-2, ... after an optional delay"""

    def __init__(self, delay: float = 0.0, fail: bool = False) -> None:
        self.calls = 0
        self.delay = delay
        self.fail = fail

    async def __call__(self) -> Token:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise AuthError("permission denied: bad secret")
        return make_token(f"token-{self.calls}")


@pytest.mark.unit
def test_token_is_expiring_respects_margin():
    token = make_token(expires_in=30)

    assert not token.is_expiring()
    assert token.is_expiring(margin_seconds=60)


@pytest.mark.unit
def test_token_repr_hides_value():
    assert "secret-token" not in repr(make_token("secret-token"))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_get_or_refresh_caches_valid_token():
    authenticate = CountingAuthenticator()
    store = TokenStore(authenticate)

    first = await store.get_or_refresh()
    second = await store.get_or_refresh()

    assert first is second
    assert authenticate.calls == 1
    assert store.cached is first
    assert not store.is_expired()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_token_inside_margin_is_refreshed_before_use():
    authenticate = CountingAuthenticator()
    store = TokenStore(authenticate, refresh_margin=60)
    store._token = make_token("old", expires_in=30)

    token = await store.get_or_refresh()

    assert token.value == "token-1"
    assert authenticate.calls == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_concurrent_callers_share_one_authentication():
    authenticate = CountingAuthenticator(delay=0.05)
    store = TokenStore(authenticate)

    tokens = await asyncio.gather(*(store.get_or_refresh() for _ in range(10)))

    assert authenticate.calls == 1
    assert {t.value for t in tokens} == {"token-1"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_concurrent_force_refresh_with_same_stale_token_authenticates_once():
    authenticate = CountingAuthenticator(delay=0.05)
    store = TokenStore(authenticate)
    stale = await store.get_or_refresh()

    tokens = await asyncio.gather(
        *(store.force_refresh(stale=stale) for _ in range(5))
    )

    assert authenticate.calls == 2
    assert {t.value for t in tokens} == {"token-2"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_force_refresh_skips_auth_when_stale_token_already_replaced():
    authenticate = CountingAuthenticator()
    store = TokenStore(authenticate)
    stale = await store.get_or_refresh()
    fresh = await store.force_refresh(stale=stale)

    again = await store.force_refresh(stale=stale)

    assert again is fresh
    assert authenticate.calls == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_force_refresh_without_stale_always_authenticates():
    authenticate = CountingAuthenticator()
    store = TokenStore(authenticate)
    await store.get_or_refresh()

    token = await store.force_refresh()

    assert token.value == "token-2"
    assert authenticate.calls == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_token():
    authenticate = CountingAuthenticator()
    store = TokenStore(authenticate)
    previous = await store.get_or_refresh()
    authenticate.fail = True

    with pytest.raises(AuthError):
        await store.force_refresh()

    assert store.cached is previous


@pytest.mark.unit
@pytest.mark.asyncio
async def test_failed_refresh_is_raised_to_every_waiter():
    authenticate = CountingAuthenticator(delay=0.05, fail=True)
    store = TokenStore(authenticate)

    results = await asyncio.gather(
        *(store.get_or_refresh() for _ in range(3)), return_exceptions=True
    )

    assert authenticate.calls == 1
    assert all(isinstance(r, AuthError) for r in results)
    assert store.cached is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_cancelled_caller_does_not_cancel_refresh():
    authenticate = CountingAuthenticator(delay=0.05)
    store = TokenStore(authenticate)

    waiter = asyncio.ensure_future(store.get_or_refresh())
    await asyncio.sleep(0.01)
    waiter.cancel()
    with pytest.raises(asyncio.CancelledError):
        await waiter

    token = await store.get_or_refresh()

    assert token.value == "token-1"
    assert authenticate.calls == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_clear_forces_new_authentication():
    authenticate = CountingAuthenticator()
    store = TokenStore(authenticate)
    await store.get_or_refresh()

    store.clear()

    assert store.is_expired()
    assert (await store.get_or_refresh()).value == "token-2"


@pytest.mark.unit
def test_is_expired_uses_wall_clock():
    store = TokenStore(CountingAuthenticator())
    now = datetime.now(timezone.utc)
    store._token = Token(
        value="t", issued_at=now - timedelta(hours=2), expires_at=now - timedelta(seconds=1)
    )

    assert store.is_expired()
