"""
Shared route dependencies.
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from app.core.errors import Forbidden, Unauthorized
from app.core.security import decode_access_token
from app.db.session import get_db
from app.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the caller from a bearer JWT; inactive users are refused."""
    if credentials is None:
        raise Unauthorized("Unauthorized")

    payload = decode_access_token(credentials.credentials)
    if not payload or "user_id" not in payload:
        raise Unauthorized("Unauthorized")

    user = db.query(User).filter(User.id == payload["user_id"]).first()
    if not user:
        raise Unauthorized("Unauthorized")
    if not user.active:
        raise Forbidden("User account is inactive")
    return user
