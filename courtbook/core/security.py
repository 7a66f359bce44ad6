from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from courtbook.core.config import get_settings


def create_access_token(user_id: str, *, lifetime: timedelta | None = None) -> str:
    """Signed bearer token naming the acting user.

    Login happens elsewhere; this only mints the token the API expects.
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    if lifetime is None:
        lifetime = timedelta(minutes=settings.access_token_exp_minutes)

    claims: dict[str, Any] = {"sub": user_id, "iat": int(now.timestamp()), "exp": int((now + lifetime).timestamp())}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def user_id_from_token(token: str) -> str:
    settings = get_settings()
    claims = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    user_id = claims.get("sub")
    if not user_id:
        raise JWTError("Token has no subject")
    return str(user_id)
