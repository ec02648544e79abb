# hostelcare/db/init_db.py
"""Database initialization utilities."""

from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from hostelcare.config.logging import get_logger
from hostelcare.config.security import get_password_hash
from hostelcare.config.settings import settings
from hostelcare.models import AdminRole, AdminUser, Base
from hostelcare.repositories import AdminRepository

logger = get_logger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create any missing tables.

    Note: This is suitable for development/testing only.
    Production schemas should be managed with migrations.
    """
    existing_tables = set(inspect(engine).get_table_names())
    missing = set(Base.metadata.tables) - existing_tables
    if not missing:
        logger.info(f"Database already initialized with {len(existing_tables)} tables")
        return

    Base.metadata.create_all(bind=engine)
    logger.info(f"Created tables: {', '.join(sorted(missing))}")


def ensure_default_admin(
    db: Session,
    username: Optional[str] = None,
    password: Optional[str] = None,
    full_name: Optional[str] = None,
) -> Optional[AdminUser]:
    """
    Create the bootstrap admin account if one is configured and missing.

    Returns the created admin, or None when nothing was created.
    """
    username = username or settings.FIRST_ADMIN_USERNAME
    password = password or settings.FIRST_ADMIN_PASSWORD
    if not username or not password:
        return None

    admins = AdminRepository(db)
    if admins.get_by_username(username) is not None:
        return None

    admin = admins.add(
        AdminUser(
            username=username,
            password_hash=get_password_hash(password),
            full_name=full_name or settings.FIRST_ADMIN_FULL_NAME,
            role=AdminRole.SUPER_ADMIN,
        )
    )
    db.commit()
    logger.info(f"Created default admin '{username}'")
    return admin
