from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from models import Book


class BookRepository:
    """Book store keyed by the caller-supplied isbn."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, book: Book) -> Book:
        saved = await self.db.merge(book)
        await self.db.commit()
        await self.db.refresh(saved)
        return saved

    async def get(self, isbn: str) -> Book | None:
        return await self.db.get(Book, isbn)

    async def exists(self, isbn: str) -> bool:
        stmt = select(Book.isbn).where(Book.isbn == isbn)
        return (await self.db.execute(stmt)).scalar_one_or_none() is not None

    async def list(self, author_id: int | None = None) -> list[Book]:
        stmt = select(Book)
        if author_id is not None:
            stmt = stmt.where(Book.author_id == author_id)
        stmt = stmt.order_by(Book.isbn.asc())
        return list((await self.db.execute(stmt)).scalars().all())

    async def delete(self, isbn: str) -> None:
        await self.db.execute(delete(Book).where(Book.isbn == isbn))
        await self.db.commit()
