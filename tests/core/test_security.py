from datetime import timedelta

import pytest
from fastapi import HTTPException

from agromove.core.security import CallerIdentity, create_access_token, decode_access_token, get_current_admin


def test_token_round_trip_resolves_identity():
    token = create_access_token("user-1", "SHIPPER")
    assert decode_access_token(token) == CallerIdentity(user_id="user-1", role="SHIPPER")


def test_expired_token_is_rejected():
    token = create_access_token("user-1", "SHIPPER", expires_delta=timedelta(seconds=-5))
    with pytest.raises(HTTPException) as excinfo:
        decode_access_token(token)
    assert excinfo.value.status_code == 401


@pytest.mark.asyncio
async def test_admin_guard_accepts_configured_roles_only():
    assert await get_current_admin(CallerIdentity("a", "superadmin"))
    with pytest.raises(HTTPException) as excinfo:
        await get_current_admin(CallerIdentity("s", "SHIPPER"))
    assert excinfo.value.status_code == 403
