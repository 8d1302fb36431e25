from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from database import get_async_db
from repositories.author_repository import AuthorRepository
from repositories.book_repository import BookRepository
from services.author_service import AuthorService
from services.book_service import BookService


def get_author_service(db: AsyncSession = Depends(get_async_db)) -> AuthorService:
    return AuthorService(AuthorRepository(db))


def get_book_service(db: AsyncSession = Depends(get_async_db)) -> BookService:
    return BookService(BookRepository(db), AuthorRepository(db))
