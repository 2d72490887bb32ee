"""User model definitions."""

from sqlalchemy import Column, Integer, String
from authors_api.database import Base


class User(Base):
    """Represents an account allowed to request access tokens."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(150), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
