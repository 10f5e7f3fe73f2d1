"""CRUD operations for server-side login sessions."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.orm import Session

from app.core.security import generate_session_token, session_expiry
from app.crud.base import CRUDBase
from app.models.user_session import UserSession


class CRUDUserSession(CRUDBase[UserSession, dict, dict]):
    """CRUD operations for UserSession."""

    def create_session(self, db: Session, *, user_id: int) -> UserSession:
        """Open a new session for a user."""
        session = UserSession(
            token=generate_session_token(),
            user_id=user_id,
            expires_at=session_expiry(),
        )
        return self.save(db, session)

    def get_active(self, db: Session, *, token: str) -> Optional[UserSession]:
        """Get a session by token; expired sessions are deleted and ignored."""
        stmt = select(UserSession).where(UserSession.token == token).limit(1)
        session = db.scalars(stmt).first()
        if not session:
            return None

        if session.expires_at and session.expires_at <= datetime.utcnow():
            self.remove(db, db_obj=session)
            return None

        return session

    def delete_by_token(self, db: Session, *, token: str) -> int:
        """Destroy a session. Returns the number of rows removed."""
        stmt = delete(UserSession).where(UserSession.token == token)
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return result.rowcount or 0

    def delete_expired(self, db: Session, *, user_id: Optional[int] = None) -> int:
        """Purge expired sessions, optionally only for one user."""
        conditions = [UserSession.expires_at <= datetime.utcnow()]
        if user_id is not None:
            conditions.append(UserSession.user_id == user_id)
        stmt = delete(UserSession).where(and_(*conditions))
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return result.rowcount or 0


# Singleton instance
crud_user_session = CRUDUserSession(UserSession)
