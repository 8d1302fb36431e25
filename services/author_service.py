import logging

from errors import InvalidArgumentError, InvalidStateError
from models import Author
from repositories.author_repository import AuthorRepository
from schemas.author import AuthorUpdateRequest

logger = logging.getLogger(__name__)


class AuthorService:
    def __init__(self, authors: AuthorRepository):
        self.authors = authors

    async def create(self, author: Author) -> Author:
        if author.id is not None:
            raise InvalidArgumentError("Author id must not be set on create")
        saved = await self.authors.save(author)
        logger.info("Created author %s", saved.id)
        return saved

    async def list(self) -> list[Author]:
        return await self.authors.list()

    async def get(self, author_id: int) -> Author | None:
        return await self.authors.get(author_id)

    async def full_update(self, author_id: int, author: Author) -> Author:
        """Replace every mutable field of an existing author.

        The path id wins over any id carried by ``author``.
        """
        if not await self.authors.exists(author_id):
            raise InvalidStateError(f"Author {author_id} does not exist")
        replacement = Author(
            id=author_id,
            name=author.name,
            age=author.age,
            description=author.description,
            image=author.image,
        )
        saved = await self.authors.save(replacement)
        logger.info("Replaced author %s", author_id)
        return saved

    async def partial_update(
        self, author_id: int, update_request: AuthorUpdateRequest
    ) -> Author:
        """Apply only the fields present in ``update_request``.

        Absent fields keep their stored value. An empty request still
        returns the stored record unchanged.
        """
        existing = await self.authors.get(author_id)
        if existing is None:
            raise InvalidStateError(f"Author {author_id} does not exist")

        update_data = update_request.provided_fields()
        for key, val in update_data.items():
            setattr(existing, key, val)

        saved = await self.authors.save(existing)
        logger.info("Patched author %s fields=%s", author_id, sorted(update_data))
        return saved

    async def delete(self, author_id: int) -> None:
        await self.authors.delete(author_id)
        logger.info("Deleted author %s", author_id)
