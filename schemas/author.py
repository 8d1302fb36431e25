from pydantic import BaseModel
from .shared import PartialUpdate


class AuthorDto(BaseModel):
    id: int | None = None
    name: str
    age: int
    description: str
    image: str

    class Config:
        from_attributes = True


class AuthorUpdateRequest(PartialUpdate):
    name: str | None = None
    age: int | None = None
    description: str | None = None
    image: str | None = None
