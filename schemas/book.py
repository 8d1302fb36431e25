from pydantic import BaseModel
from .shared import AuthorSummaryDto, PartialUpdate


class BookSummaryDto(BaseModel):
    title: str
    description: str
    image: str
    author: AuthorSummaryDto


class BookDto(BaseModel):
    isbn: str
    title: str
    description: str
    image: str
    author: AuthorSummaryDto

    class Config:
        from_attributes = True


class BookUpdateRequest(PartialUpdate):
    title: str | None = None
    description: str | None = None
    image: str | None = None
