from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eventmarketers.config import get_settings

ADMIN_USER_TYPE = "ADMIN"

_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AdminUser:
    id: str
    user_type: str
    email: Optional[str] = None


def create_access_token(claims: dict[str, Any], ttl_minutes: Optional[int] = None) -> str:
    settings = get_settings()
    data = dict(claims)
    now = int(time.time())
    data["iat"] = now
    data["exp"] = now + (ttl_minutes if ttl_minutes is not None else settings.jwt_ttl_minutes) * 60
    return jwt.encode(data, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Return the token claims; raises ``jwt.InvalidTokenError`` when invalid or expired."""

    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> AdminUser:
    """FastAPI dependency admitting admins only; subadmins and customers get 403."""

    if credentials is None or not credentials.credentials:
        raise _unauthorized("Access token is required")

    try:
        claims = decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError as exc:
        raise _unauthorized("Invalid or expired token") from exc

    user_type = claims.get("userType")
    if user_type != ADMIN_USER_TYPE:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")

    return AdminUser(id=str(claims.get("id", "")), user_type=user_type, email=claims.get("email"))
