"""
Task model. Tasks are managed elsewhere; users only need to know whether
any task still points at them.
"""
from sqlalchemy import Column, String, Text, Boolean, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Task(BaseModel):
    """Task assigned to a user."""
    __tablename__ = "tasks"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    text = Column(Text, nullable=False, default="")
    completed = Column(Boolean, default=False, nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="tasks")
