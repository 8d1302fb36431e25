import logging

from errors import IntegrityFaultError, InvalidStateError
from models import Book
from repositories.author_repository import AuthorRepository
from repositories.book_repository import BookRepository
from schemas.book import BookSummaryDto, BookUpdateRequest

logger = logging.getLogger(__name__)


class BookService:
    def __init__(self, books: BookRepository, authors: AuthorRepository):
        self.books = books
        self.authors = authors

    async def create_update(
        self, isbn: str, book_summary: BookSummaryDto
    ) -> tuple[Book, bool]:
        """Create the book at ``isbn`` or overwrite it.

        Returns the stored book and whether it was created (``True``) or
        updated (``False``). The referenced author must already exist;
        nothing is written otherwise.
        """
        author_id = book_summary.author.id
        author = await self.authors.get(author_id)
        if author is None:
            raise InvalidStateError(f"Author {author_id} does not exist")
        if author.id is None:
            logger.error("Author lookup for %s returned a row without an id", author_id)
            raise IntegrityFaultError("Referenced author has no id")

        is_created = not await self.books.exists(isbn)
        book = Book(
            isbn=isbn,
            title=book_summary.title,
            description=book_summary.description,
            image=book_summary.image,
            author=author,
        )
        saved = await self.books.save(book)
        logger.info("%s book %s", "Created" if is_created else "Updated", isbn)
        return saved, is_created

    async def list(self, author_id: int | None = None) -> list[Book]:
        return await self.books.list(author_id=author_id)

    async def get(self, isbn: str) -> Book | None:
        return await self.books.get(isbn)

    async def partial_update(self, isbn: str, update_request: BookUpdateRequest) -> Book:
        existing = await self.books.get(isbn)
        if existing is None:
            raise InvalidStateError(f"Book {isbn} does not exist")

        update_data = update_request.provided_fields()
        for key, val in update_data.items():
            setattr(existing, key, val)

        saved = await self.books.save(existing)
        logger.info("Patched book %s fields=%s", isbn, sorted(update_data))
        return saved

    async def delete(self, isbn: str) -> None:
        await self.books.delete(isbn)
        logger.info("Deleted book %s", isbn)
