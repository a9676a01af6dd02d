from __future__ import annotations

import logging

from fastapi import Cookie, Depends, Header
from sqlalchemy.orm import Session

from app.auth.jwt_tokens import JwtConfig, TokenError, decode_access_token
from app.core.config import settings
from app.core.db import get_db
from app.models import User

log = logging.getLogger("playmate.auth")


def get_jwt_config() -> JwtConfig:
    return JwtConfig(
        secret=settings.JWT_SECRET,
        issuer=settings.JWT_ISS,
        audience=settings.JWT_AUD,
        ttl_seconds=settings.ACCESS_TOKEN_TTL_SECONDS,
    )


def _bearer(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() != "bearer" or not value.strip():
        return None
    return value.strip()


def get_current_user_optional(
    db: Session = Depends(get_db),
    access_token: str | None = Cookie(default=None, alias="access_token"),
    authorization: str | None = Header(default=None),
) -> User | None:
    """Resolve the caller from the access_token cookie or a Bearer header.

    Returns None for anonymous or invalid credentials; the guard pipeline
    decides what that means for the endpoint.
    """
    token = access_token or _bearer(authorization)
    if not token:
        return None

    try:
        user_id = decode_access_token(get_jwt_config(), token)
    except TokenError as e:
        log.info("rejected token: %s", e)
        return None

    return db.query(User).filter(User.id == user_id).one_or_none()
