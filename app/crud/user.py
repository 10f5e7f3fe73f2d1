"""CRUD operations for `User` model."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.core.security import get_password_hash, verify_password
from app.crud.base import CRUDBase
from app.models.user import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class CRUDUser(CRUDBase[User, UserCreate, UserCreate]):
    def get_by_email(self, db: Session, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        stmt = select(User).where(User.email == email.strip().lower()).limit(1)
        return db.scalars(stmt).first()

    def get_by_email_or_username(self, db: Session, *, email: str, username: str) -> Optional[User]:
        """Find any user already holding this email or this username."""
        stmt = select(User).where(
            or_(User.email == email.strip().lower(), User.username == username)
        ).limit(1)
        return db.scalars(stmt).first()

    def create_user(self, db: Session, *, user_in: UserCreate, is_admin: bool = False) -> User:
        user_data = user_in.model_dump(exclude_unset=True)
        raw_password = user_data.pop("password")
        user_data["password_hash"] = get_password_hash(raw_password)
        user_data["is_admin"] = is_admin

        db_obj = User(**user_data)
        return self.save(db, db_obj)

    def authenticate(self, db: Session, *, email: str, password: str) -> Optional[User]:
        """Authenticate user by email and password."""
        user = self.get_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def provision_admin(
        self,
        db: Session,
        *,
        email: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Tuple[User, bool]:
        """Promote the account with `email` to admin, or create it.

        An existing account keeps its password hash; `password` is only
        applied when the account has none yet.

        Returns:
            (user, created)

        Raises:
            ValueError: If the account does not exist and username/password are missing
        """
        user = self.get_by_email(db, email)
        if user:
            if not user.password_hash and password:
                user.password_hash = get_password_hash(password)
                logger.info(f"[ADMIN] Password hash set for {user.email}")
            user.is_admin = True
            user = self.save(db, user)
            logger.info(f"[ADMIN] Promoted existing user to admin: id={user.id}, username={user.username}")
            return user, False

        if not username or not password:
            raise ValueError("username and password are required to create a new admin account")

        user = self.create_user(
            db,
            user_in=UserCreate(username=username, email=email, password=password),
            is_admin=True,
        )
        logger.info(f"[ADMIN] Created admin user: id={user.id}, username={user.username}")
        return user, True


# Singleton instance
crud_user = CRUDUser(User)
