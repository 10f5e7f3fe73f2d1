"""Security utilities for password hashing and signed session cookies."""

import secrets
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import settings


# Password hashing context - supports PBKDF2 (primary) and bcrypt (legacy)
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")
BCRYPT_MAX_BYTES = 72

# Session cookie signing
ALGORITHM = "HS256"
SESSION_EXPIRE_DAYS = settings.SESSION_EXPIRE_DAYS


def get_password_hash(password: str) -> str:
    """Hash a password with PBKDF2 (the context default)."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a plain password against a PBKDF2 or legacy bcrypt hash."""
    if not hashed_password:
        return False

    secret = plain_password
    if pwd_context.identify(hashed_password) == "bcrypt":
        # bcrypt only ever saw the first 72 bytes
        secret = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]

    try:
        return pwd_context.verify(secret, hashed_password)
    except ValueError:
        # Return False if the hash scheme is unsupported
        return False


def generate_session_token() -> str:
    """Opaque random token identifying a server-side session."""
    return secrets.token_urlsafe(32)


def session_expiry(now: Optional[datetime] = None) -> datetime:
    """Expiry timestamp for a session created at `now`."""
    return (now or datetime.utcnow()) + timedelta(days=SESSION_EXPIRE_DAYS)


def create_session_cookie(session_token: str, expires_at: datetime) -> str:
    """Sign a session token for the session cookie.

    Args:
        session_token: Server-side session token (stored in user_sessions)
        expires_at: Expiry of the server-side session

    Returns:
        Encoded JWT carrying the session token as subject

    Raises:
        ValueError: If SECRET_KEY is not configured
    """
    if not settings.SECRET_KEY:
        raise ValueError("SECRET_KEY environment variable is not set")

    to_encode: Dict[str, Any] = {"sub": session_token, "exp": expires_at}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_session_cookie(cookie_value: str) -> Optional[str]:
    """Return the session token from a signed cookie, or None if invalid/expired."""
    try:
        payload = jwt.decode(cookie_value, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub")
