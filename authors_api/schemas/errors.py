"""Error body returned by every failing endpoint."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    Message: str
    Details: str | None = None

    def to_body(self) -> dict:
        return self.model_dump(exclude_none=True)
