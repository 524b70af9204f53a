"""
User management routes.

Every route answers through UserResponse or a plain message, so password
hashes never leave the service.
"""
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.schemas.user import UserCreate, UserUpdate, UserDelete, UserResponse, MessageResponse
from app.models.user import User
from app.api.dependencies import get_current_user
from app.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def get_all_users(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get all users."""
    return user_service.list_users(db)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return current_user


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_new_user(
    user_data: UserCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a user."""
    user = user_service.create_user(db, user_data.username, user_data.password, user_data.roles)
    return {"message": f"New user {user.username} created"}


@router.patch("", response_model=MessageResponse)
async def update_user(
    user_data: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a user."""
    user = user_service.update_user(
        db,
        user_data.id,
        user_data.username,
        user_data.roles,
        user_data.active,
        password=user_data.password
    )
    return {"message": f"{user.username} updated"}


@router.delete("", response_model=str)
async def delete_user(
    user_data: Optional[UserDelete] = Body(default=None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a user that has no assigned tasks."""
    user_id = user_data.id if user_data else None
    return user_service.delete_user(db, user_id)
