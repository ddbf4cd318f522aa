from datetime import datetime, timezone, timedelta
from typing import Optional

from fastapi import Header
from fastapi.security.utils import get_authorization_scheme_param
from jose import jwt, JWTError
from pydantic import BaseModel

from freight_quotes.core.config import settings
from freight_quotes.core.errors import Unauthenticated


class Caller(BaseModel):
    id: str
    email: Optional[str] = None
    role: Optional[str] = None


def create_access_token(subject: str, email: str | None = None, expires_minutes: int | None = None) -> str:
    expires = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire_dt = datetime.now(timezone.utc) + timedelta(minutes=expires)
    to_encode = {
        "sub": str(subject),
        "aud": settings.AUTH_JWT_AUDIENCE,
        "role": "authenticated",
        "exp": expire_dt,
    }
    if email:
        to_encode["email"] = email
    return jwt.encode(to_encode, settings.AUTH_JWT_SECRET, algorithm=settings.AUTH_JWT_ALGORITHM)


def verify_access_token(token: str) -> Caller:
    try:
        payload = jwt.decode(
            token,
            settings.AUTH_JWT_SECRET,
            algorithms=[settings.AUTH_JWT_ALGORITHM],
            audience=settings.AUTH_JWT_AUDIENCE,
        )
    except JWTError as e:
        raise Unauthenticated(detail=f"Token rejected: {e}")
    user_id = payload.get("sub")
    if not user_id:
        raise Unauthenticated(detail="Token has no subject")
    return Caller(id=user_id, email=payload.get("email"), role=payload.get("role"))


async def get_current_caller(authorization: Optional[str] = Header(default=None)) -> Caller:
    if not authorization:
        raise Unauthenticated("No authorization header")
    scheme, token = get_authorization_scheme_param(authorization)
    if scheme.lower() != "bearer" or not token:
        raise Unauthenticated(detail=f"Unsupported authorization scheme {scheme!r}")
    return verify_access_token(token)
