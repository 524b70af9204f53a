"""
Authentication routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.errors import Forbidden, Unauthorized
from app.core.security import verify_password, create_access_token
from app.db.session import get_db
from app.schemas.user import UserLogin, Token
from app.services.user_service import get_user_by_username

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get JWT token."""
    user = get_user_by_username(db, credentials.username)
    
    if not user or not verify_password(credentials.password, user.password):
        raise Unauthorized("Unauthorized")
    
    if not user.active:
        raise Forbidden("User account is inactive")
    
    access_token = create_access_token(
        data={"sub": user.username, "user_id": user.id, "roles": user.roles}
    )
    
    return {"access_token": access_token, "token_type": "bearer"}
