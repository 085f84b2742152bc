"""Reference HTTP Schemas."""

from pydantic import BaseModel


class ReferenceItemResponse(BaseModel):
    id: int
    name: str
    short_name: str | None = None
    full_name: str | None = None

    model_config = {"from_attributes": True}
