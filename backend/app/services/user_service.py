"""
User service for user-related business logic.
"""
import logging
from typing import List, Optional, Sequence, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app.core.errors import AppError, Conflict, InvalidInput, NotFound, StoreFailure
from app.core.security import get_password_hash
from app.models.task import Task
from app.models.user import User

logger = logging.getLogger(__name__)

INVALID_USER_DATA = "Invalid user data received"


def get_user(db: Session, user_id: int) -> Optional[User]:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """Get a user by exact (case-sensitive) username."""
    return db.query(User).filter(User.username == username).first()


def has_assigned_tasks(db: Session, user_id: int) -> bool:
    """Whether any task still references the user."""
    return db.query(Task.id).filter(Task.user_id == user_id).first() is not None


def _username_taken(db: Session, username: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(User.id).filter(User.username == username)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def _commit_user(db: Session, user: User, failure: Type[AppError]) -> None:
    """
    Commit a pending user write.

    The unique index on username is the final word on duplicates: a writer
    that passed the pre-check but lost the race gets Conflict here.
    """
    # Rollback expires the instance, so read what we need first
    username, user_id = user.username, user.id
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _username_taken(db, username, exclude_id=user_id):
            logger.warning(f"Username '{username}' was taken concurrently")
            raise Conflict("Duplicate username") from e
        logger.error(f"Integrity error writing user '{username}': {e}")
        raise failure(INVALID_USER_DATA) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Store error writing user '{username}': {e}", exc_info=True)
        raise failure(INVALID_USER_DATA) from e


def _valid_roles(roles) -> bool:
    return isinstance(roles, (list, tuple)) and len(roles) > 0


def list_users(db: Session) -> List[User]:
    """Get all users in insertion order."""
    users = db.query(User).order_by(User.id).all()
    if not users:
        raise NotFound("No User found")
    return users


def create_user(
    db: Session,
    username: Optional[str],
    password: Optional[str],
    roles: Optional[Sequence[str]]
) -> User:
    """Create a user with a hashed password."""
    if not username or not password or not _valid_roles(roles):
        raise InvalidInput("All fields are required")

    if get_user_by_username(db, username):
        logger.warning(f"Rejected create: username '{username}' already exists")
        raise Conflict("Duplicate username")

    user = User(
        username=username,
        password=get_password_hash(password),
        roles=list(roles)
    )
    db.add(user)
    _commit_user(db, user, failure=InvalidInput)
    db.refresh(user)

    logger.info(f"Created user '{user.username}' (id={user.id})")
    return user


def update_user(
    db: Session,
    user_id: Optional[int],
    username: Optional[str],
    roles: Optional[Sequence[str]],
    active: Optional[bool],
    password: Optional[str] = None
) -> User:
    """
    Overwrite a user's username, roles and active flag.
    The password is re-hashed only when a new one is supplied.
    """
    if user_id is None or not username or not _valid_roles(roles) or not isinstance(active, bool):
        raise InvalidInput("All fields are required")

    user = get_user(db, user_id)
    if not user:
        raise NotFound("User not found")

    duplicate = get_user_by_username(db, username)
    if duplicate and duplicate.id != user.id:
        logger.warning(f"Rejected update of user {user.id}: username '{username}' already exists")
        raise Conflict("Duplicate username")

    user.username = username
    user.roles = list(roles)
    user.active = active

    if password:
        user.password = get_password_hash(password)

    _commit_user(db, user, failure=StoreFailure)
    db.refresh(user)

    logger.info(f"Updated user {user.id} ('{user.username}')")
    return user


def delete_user(db: Session, user_id: Optional[int]) -> str:
    """Delete a user that no task references. Returns a confirmation line."""
    if user_id is None:
        raise InvalidInput("User ID is required")

    if has_assigned_tasks(db, user_id):
        logger.warning(f"Rejected delete of user {user_id}: tasks still assigned")
        raise Conflict("User has assigned task")

    user = get_user(db, user_id)
    if not user:
        raise NotFound("User not found")

    username, deleted_id = user.username, user.id
    db.delete(user)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Store error deleting user {deleted_id}: {e}", exc_info=True)
        raise StoreFailure(f"Could not delete user {deleted_id}") from e

    logger.info(f"Deleted user {deleted_id} ('{username}')")
    return f"Username {username} with ID {deleted_id} deleted successfully"
