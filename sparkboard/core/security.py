"""
Security Helpers

Password hashing (bcrypt) and signed access tokens (JWT via python-jose).
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from sparkboard.core.config import settings
from sparkboard.core.errors import Unauthenticated

# bcrypt only looks at the first 72 bytes of the secret
BCRYPT_MAX_BYTES = 72


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt with the configured work factor."""
    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a password against its hash."""
    if not hashed_password:
        return False
    password_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
    extra_claims: Optional[Dict[str, Any]] = None,
) -> tuple[str, datetime]:
    """
    Create a signed access token for ``subject`` (the user id).

    Returns the encoded token together with its expiry time.
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode: Dict[str, Any] = dict(extra_claims or {})
    to_encode.update({"sub": subject, "exp": expire})
    token = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return token, expire


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify a token's signature and expiry and return its claims.

    Raises:
        Unauthenticated: If the token is malformed, expired, tampered with, or has no subject
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise Unauthenticated("Could not validate credentials", clear_credential=True)
    if not payload.get("sub"):
        raise Unauthenticated("Could not validate credentials", clear_credential=True)
    return payload
