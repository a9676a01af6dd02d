from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

import jwt  # PyJWT


class TokenError(Exception):
    pass


@dataclass(frozen=True)
class JwtConfig:
    secret: str
    issuer: str
    audience: str
    ttl_seconds: int


def create_access_token(cfg: JwtConfig, user_id: int, *, now: int | None = None) -> str:
    """Issue an access token. The auth service owns issuance; kept for tests and ops tooling."""
    iat = int(time.time()) if now is None else now
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "iat": iat,
        "exp": iat + cfg.ttl_seconds,
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "typ": "access",
    }
    return jwt.encode(payload, cfg.secret, algorithm="HS256")


def decode_access_token(cfg: JwtConfig, token: str) -> int:
    """Return the user id carried by a valid access token."""
    try:
        payload = jwt.decode(
            token,
            cfg.secret,
            algorithms=["HS256"],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={"require": ["exp", "iat", "iss", "aud", "sub"]},
        )
    except jwt.PyJWTError as e:
        raise TokenError(str(e)) from e

    if payload.get("typ") != "access":
        raise TokenError("not an access token")
    try:
        return int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise TokenError("bad subject") from e
