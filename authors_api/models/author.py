"""Author model definitions."""

from sqlalchemy import Column, Integer, String
from authors_api.database import Base


class Author(Base):
    """Represents a single author record."""
    __tablename__ = "author"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column("author_id", Integer, primary_key=True, autoincrement=True, index=True)
    name = Column("author_name", String(255))
    num_of_books = Column("num_of_books", Integer)
    rating = Column("author_rating", String(50))
