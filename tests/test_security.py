import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from hireme.core.errors import Unauthenticated
from hireme.core.security import get_caller


def _auth_client(get_user):
    client = MagicMock()
    client.auth.get_user = get_user
    return client


@pytest.mark.asyncio
async def test_no_header_is_anonymous():
    caller = await get_caller(None)
    assert caller.user_id is None
    assert caller.is_authenticated is False


@pytest.mark.asyncio
async def test_valid_token_resolves_user():
    response = MagicMock()
    response.user.id = "user-123"
    client = _auth_client(AsyncMock(return_value=response))

    with patch("hireme.core.security.db_service.get_client", new_callable=AsyncMock, return_value=client):
        caller = await get_caller("Bearer good-token")

    assert caller.user_id == "user-123"
    client.auth.get_user.assert_awaited_once_with("good-token")


@pytest.mark.asyncio
async def test_rejected_token():
    client = _auth_client(AsyncMock(side_effect=RuntimeError("invalid JWT")))

    with patch("hireme.core.security.db_service.get_client", new_callable=AsyncMock, return_value=client):
        with pytest.raises(Unauthenticated):
            await get_caller("Bearer expired")


@pytest.mark.asyncio
async def test_malformed_header():
    with pytest.raises(Unauthenticated):
        await get_caller("Basic abc")
    with pytest.raises(Unauthenticated):
        await get_caller("Bearer ")
