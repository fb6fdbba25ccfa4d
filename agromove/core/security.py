"""JWT helpers resolving the caller identity for HTTP handlers.

Tokens are issued by the external identity provider; this module only
verifies them and exposes the resolved user id and role to the routers.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from agromove.core.config import Settings, get_settings

security = HTTPBearer()


@dataclass(frozen=True, slots=True)
class CallerIdentity:
    user_id: str
    role: str

    def has_role(self, roles: frozenset[str]) -> bool:
        return self.role.upper() in roles


def create_access_token(
    user_id: str,
    role: str,
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None,
) -> str:
    settings = settings or get_settings()
    payload = {
        "sub": user_id,
        "role": role,
        "exp": datetime.now(timezone.utc) + (expires_delta or timedelta(hours=24)),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> CallerIdentity:
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc

    user_id = payload.get("sub")
    role = payload.get("role")
    if not user_id or not role:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")
    return CallerIdentity(user_id=str(user_id), role=str(role))


async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> CallerIdentity:
    return decode_access_token(credentials.credentials)


async def get_current_admin(caller: CallerIdentity = Depends(get_current_user)) -> CallerIdentity:
    if not caller.has_role(get_settings().security.admin_roles):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Administrator role required")
    return caller
