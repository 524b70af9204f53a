"""
Pydantic schemas for User entity.

Request schemas keep every field optional so the service layer can answer
missing input with its own messages. UserResponse is the only read shape
handed to callers and never includes the password.
"""
from pydantic import BaseModel, Field, StrictBool, field_validator
from typing import List, Optional
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for user creation."""
    username: Optional[str] = None
    password: Optional[str] = None
    roles: Optional[List[str]] = None


class UserUpdate(BaseModel):
    """Schema for user update. `active` must be a real JSON boolean."""
    id: Optional[int] = Field(default=None, alias="_id")
    username: Optional[str] = None
    roles: Optional[List[str]] = None
    active: Optional[StrictBool] = None
    password: Optional[str] = None
    
    class Config:
        populate_by_name = True


class UserDelete(BaseModel):
    """Schema for user deletion. An `_id` that is not an integer counts as missing."""
    id: Optional[int] = Field(default=None, alias="_id")

    @field_validator("id", mode="before")
    @classmethod
    def parse_id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return None

    class Config:
        populate_by_name = True


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    username: str
    roles: List[str]
    active: bool
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str


class UserLogin(BaseModel):
    """Schema for user login."""
    username: str
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
