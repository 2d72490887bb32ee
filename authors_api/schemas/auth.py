"""Models for login, issued tokens and stored users."""

from pydantic import BaseModel, Field, field_validator


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator('username')
    @classmethod
    def normalize_username(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Username is required.')
        return normalized


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = 'bearer'
    expires_in: int


class UserDraft(BaseModel):
    id: int | None = None
    username: str = Field(..., min_length=1, max_length=150)
    password_hash: str = Field(..., min_length=1)


class UserRecord(UserDraft):
    id: int
