"""FastAPI dependency injection functions for authentication and database access."""

import logging
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from app.config import settings
from app.core.exceptions import ForbiddenException, LoginRequiredException
from app.core.security import decode_session_cookie
from app.crud import crud_user, crud_user_session
from app.database import SessionLocal
from app.models.user import User

logger = logging.getLogger(__name__)

# Signed session cookie set at login/register
session_cookie_scheme = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_token(
    cookie: Optional[str] = Depends(session_cookie_scheme),
) -> Optional[str]:
    """Server-side session token from the signed cookie, or None."""
    if not cookie:
        return None
    return decode_session_cookie(cookie)


def get_optional_current_user(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Dependency to optionally get the logged-in user.
    Returns None if there is no valid session.

    Useful for pages that render for both anonymous and logged-in visitors.

    Args:
        token: Session token decoded from the cookie
        db: Database session

    Returns:
        Optional[User]: Logged-in user or None
    """
    if not token:
        return None

    session = crud_user_session.get_active(db, token=token)
    if session is None:
        logger.info("[AUTH] Unknown or expired session")
        return None

    return crud_user.get(db, session.user_id)


def get_current_user(
    current_user: Optional[User] = Depends(get_optional_current_user),
) -> User:
    """
    Dependency for routes that need a session.

    Raises:
        LoginRequiredException: 303 redirect to /login if there is no valid session
    """
    if current_user is None:
        raise LoginRequiredException()
    return current_user


def get_current_admin_user(
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Dependency for the admin panel.

    Raises:
        ForbiddenException: 403 if the logged-in user is not an admin
    """
    if not current_user.is_admin:
        logger.warning(f"[AUTH] Admin access denied: user_id={current_user.id}")
        raise ForbiddenException(detail="Yönetici erişimi gerekli")
    return current_user


__all__ = [
    "session_cookie_scheme",
    "get_db",
    "get_session_token",
    "get_current_user",
    "get_optional_current_user",
    "get_current_admin_user",
]
