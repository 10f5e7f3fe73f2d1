"""Core module exports."""

from .security import (
    create_session_cookie,
    decode_session_cookie,
    generate_session_token,
    get_password_hash,
    session_expiry,
    verify_password,
    ALGORITHM,
    SESSION_EXPIRE_DAYS,
)

__all__ = [
    "create_session_cookie",
    "decode_session_cookie",
    "generate_session_token",
    "get_password_hash",
    "session_expiry",
    "verify_password",
    "ALGORITHM",
    "SESSION_EXPIRE_DAYS",
]
