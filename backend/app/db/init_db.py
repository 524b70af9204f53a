"""
Database initialization script.

Creates all tables and, when FIRST_ADMIN_USERNAME and FIRST_ADMIN_PASSWORD
are set, seeds an admin so the private user endpoints can be reached.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session
from app.core.config import settings
from app.db.session import SessionLocal, init_db

# Import all models so SQLAlchemy can register them
from app.models import User, Task
from app.services.user_service import create_user, get_user_by_username

logger = logging.getLogger(__name__)


def seed_admin(db: Session) -> Optional[User]:
    """Create the configured admin user unless it already exists."""
    if not settings.FIRST_ADMIN_USERNAME or not settings.FIRST_ADMIN_PASSWORD:
        return None

    existing = get_user_by_username(db, settings.FIRST_ADMIN_USERNAME)
    if existing:
        logger.info(f"Admin user '{existing.username}' already present")
        return existing

    return create_user(db, settings.FIRST_ADMIN_USERNAME, settings.FIRST_ADMIN_PASSWORD, ["Admin"])


if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    db = SessionLocal()
    try:
        admin = seed_admin(db)
        if admin:
            print(f"Admin user: {admin.username}")
    finally:
        db.close()
    print("Database initialized successfully!")
