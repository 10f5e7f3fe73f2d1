"""Authentication endpoints: register, login, logout."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_optional_current_user, get_session_token
from app.api.forms import login_form, register_form
from app.api.responses import user_response
from app.config import settings
from app.core.exceptions import FormValidationException, InvalidCredentialsException
from app.core.security import SESSION_EXPIRE_DAYS, create_session_cookie
from app.crud import crud_user, crud_user_session
from app.models.user import User
from app.schemas.user import AuthFormResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Authentication"],
)

DUPLICATE_USER_MESSAGE = "Bu email veya kullanıcı adı zaten kullanılıyor"


def _start_session(db: Session, user: User, redirect_to: str = "/") -> RedirectResponse:
    """Open a server-side session and hand its signed token to the client."""
    session = crud_user_session.create_session(db, user_id=user.id)

    response = RedirectResponse(url=redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_cookie(session.token, session.expires_at),
        max_age=SESSION_EXPIRE_DAYS * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return response


@router.get(
    "/register",
    response_model=AuthFormResponse,
    status_code=status.HTTP_200_OK,
    summary="Registration form",
)
def register_page(
    current_user: Optional[User] = Depends(get_optional_current_user),
) -> AuthFormResponse:
    return AuthFormResponse(form="register", current_user=user_response(current_user))


@router.post(
    "/register",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Register new user",
)
def register(
    user_in: UserCreate = Depends(register_form),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """
    Register a new user and log them in.

    Args:
        user_in: Validated registration form (username, email, password)
        db: Database session

    Returns:
        RedirectResponse: 303 to the landing page with the session cookie set

    Raises:
        FormValidationException: 400 if a field is missing or email/username is taken
    """
    existing_user = crud_user.get_by_email_or_username(
        db, email=user_in.email, username=user_in.username
    )
    if existing_user:
        raise FormValidationException(detail=DUPLICATE_USER_MESSAGE)

    try:
        db_user = crud_user.create_user(db, user_in=user_in)
    except IntegrityError:
        # Lost a race against a concurrent registration
        raise FormValidationException(detail=DUPLICATE_USER_MESSAGE)

    logger.info(f"[AUTH] User registered: id={db_user.id}, username={db_user.username}")
    return _start_session(db, db_user, "/")


@router.get(
    "/login",
    response_model=AuthFormResponse,
    status_code=status.HTTP_200_OK,
    summary="Login form",
)
def login_page(
    current_user: Optional[User] = Depends(get_optional_current_user),
) -> AuthFormResponse:
    return AuthFormResponse(form="login", current_user=user_response(current_user))


@router.post(
    "/login",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Login user",
)
def login(
    login_in: UserLogin = Depends(login_form),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """
    Login with email and password.

    Raises:
        FormValidationException: 400 if email or password is missing
        InvalidCredentialsException: 401 if credentials are wrong
    """
    user = crud_user.authenticate(db, email=login_in.email, password=login_in.password)
    if not user:
        logger.info(f"[AUTH] Failed login for email={login_in.email}")
        raise InvalidCredentialsException()

    crud_user_session.delete_expired(db, user_id=user.id)
    logger.info(f"[AUTH] User logged in: id={user.id}")
    return _start_session(db, user, "/")


@router.get(
    "/logout",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Logout user",
)
def logout(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Destroy the session and clear the cookie."""
    if token:
        try:
            crud_user_session.delete_by_token(db, token=token)
        except SQLAlchemyError as e:
            logger.error(f"Session destroy error: {e}")

    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


__all__ = ["router"]
