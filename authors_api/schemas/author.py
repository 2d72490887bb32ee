"""Request and response models for author records."""

from pydantic import BaseModel, Field, field_validator

from authors_api.database import MAX_INTEGER


class AuthorDraft(BaseModel):
    """Author payload supplied by a client. ``id`` is only meaningful on update."""

    id: int | None = Field(default=None, le=MAX_INTEGER)
    name: str | None = Field(default=None, max_length=255)
    num_of_books: int | None = Field(default=None, alias='numOfBooks', ge=0, le=MAX_INTEGER)
    rating: str | None = Field(default=None, max_length=50)

    @field_validator('name', 'rating')
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    class Config:
        populate_by_name = True


class AuthorRecord(AuthorDraft):
    id: int
