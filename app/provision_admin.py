"""Create or promote the admin account from ADMIN_* settings.

Usage:
    python -m app.provision_admin
"""

import logging
import sys

from sqlalchemy.exc import IntegrityError

from app.config import settings
from app.crud import crud_user
from app.database import SessionLocal
import app.models  # noqa: F401

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=settings.LOG_LEVEL)

    if not settings.ADMIN_EMAIL:
        print("❌ ADMIN_EMAIL is not set")
        return 1

    db = SessionLocal()
    try:
        user, created = crud_user.provision_admin(
            db,
            email=settings.ADMIN_EMAIL,
            username=settings.ADMIN_USERNAME,
            password=settings.ADMIN_PASSWORD,
        )
    except ValueError as e:
        print(f"❌ {e}")
        return 1
    except IntegrityError as e:
        logger.error(f"[ADMIN] Provisioning failed: {e}")
        print(f"❌ Username already taken: {settings.ADMIN_USERNAME}")
        return 1
    finally:
        db.close()

    if created:
        print(f"✅ Admin created: {user.username} <{user.email}>")
    else:
        print(f"✅ Admin ensured: {user.username} <{user.email}>")
    return 0


if __name__ == "__main__":
    sys.exit(main())
