from errors import IntegrityFaultError
from models import Author, Book
from schemas.author import AuthorDto
from schemas.book import BookDto
from schemas.shared import AuthorSummaryDto


def to_author_entity(dto: AuthorDto) -> Author:
    return Author(
        id=dto.id,
        name=dto.name,
        age=dto.age,
        description=dto.description,
        image=dto.image,
    )


def to_author_dto(author: Author) -> AuthorDto:
    return AuthorDto.model_validate(author, from_attributes=True)


def to_author_summary_dto(author: Author | None) -> AuthorSummaryDto:
    if author is None or author.id is None:
        raise IntegrityFaultError("Author of a stored book is missing or has no id")
    return AuthorSummaryDto(id=author.id, name=author.name, image=author.image)


def to_book_dto(book: Book) -> BookDto:
    return BookDto(
        isbn=book.isbn,
        title=book.title,
        description=book.description,
        image=book.image,
        author=to_author_summary_dto(book.author),
    )
