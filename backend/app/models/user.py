"""
User model for authentication and user management.
"""
from sqlalchemy import Column, String, Boolean, JSON
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class User(BaseModel):
    """User model; username is unique and password holds a bcrypt hash."""
    __tablename__ = "users"
    
    username = Column(String(50), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    roles = Column(JSON, nullable=False, default=lambda: ["Employee"])
    active = Column(Boolean, default=True, nullable=False)
    
    # Relationships
    tasks = relationship("Task", back_populates="user")
