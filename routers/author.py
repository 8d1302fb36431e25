from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from dependencies import get_author_service
from mappers import to_author_dto, to_author_entity
from schemas.author import AuthorDto, AuthorUpdateRequest
from services.author_service import AuthorService

router = APIRouter(prefix="/v1/authors", tags=["authors"])


@router.post("", response_model=AuthorDto, status_code=status.HTTP_201_CREATED)
async def create_author(
    author: AuthorDto,
    service: AuthorService = Depends(get_author_service),
):
    created = await service.create(to_author_entity(author))
    return to_author_dto(created)


@router.get("", response_model=List[AuthorDto])
async def read_many_authors(service: AuthorService = Depends(get_author_service)):
    return [to_author_dto(a) for a in await service.list()]


@router.get("/{author_id}", response_model=AuthorDto)
async def read_one_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
):
    author = await service.get(author_id)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return to_author_dto(author)


@router.put("/{author_id}", response_model=AuthorDto)
async def full_update_author(
    author_id: int,
    author: AuthorDto,
    service: AuthorService = Depends(get_author_service),
):
    updated = await service.full_update(author_id, to_author_entity(author))
    return to_author_dto(updated)


@router.patch("/{author_id}", response_model=AuthorDto)
async def partial_update_author(
    author_id: int,
    update_request: AuthorUpdateRequest,
    service: AuthorService = Depends(get_author_service),
):
    updated = await service.partial_update(author_id, update_request)
    return to_author_dto(updated)


@router.delete("/{author_id}", status_code=204)
async def delete_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
):
    await service.delete(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
