# gradebook/models/user.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import Base


class User(Base):
    """A teacher account; owns classes."""
    __tablename__ = "users"

    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(200))
    first_name = Column(String(100))
    last_name = Column(String(100))
    password_hash = Column(String(255))

    # Relationships
    classes = relationship("ClassModel", back_populates="teacher")
