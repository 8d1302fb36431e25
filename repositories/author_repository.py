from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from models import Author


class AuthorRepository:
    """Author store keyed by the auto-assigned integer id."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, author: Author) -> Author:
        # merge covers both insert (id is None) and overwrite by id
        saved = await self.db.merge(author)
        await self.db.commit()
        await self.db.refresh(saved)
        return saved

    async def get(self, author_id: int) -> Author | None:
        return await self.db.get(Author, author_id)

    async def exists(self, author_id: int) -> bool:
        stmt = select(Author.id).where(Author.id == author_id)
        return (await self.db.execute(stmt)).scalar_one_or_none() is not None

    async def list(self) -> list[Author]:
        stmt = select(Author).order_by(Author.id.asc())
        return list((await self.db.execute(stmt)).scalars().all())

    async def delete(self, author_id: int) -> None:
        await self.db.execute(delete(Author).where(Author.id == author_id))
        await self.db.commit()
