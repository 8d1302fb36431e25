from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from dependencies import get_book_service
from mappers import to_book_dto
from schemas.book import BookDto, BookSummaryDto, BookUpdateRequest
from services.book_service import BookService

router = APIRouter(prefix="/v1/books", tags=["books"])


@router.put("/{isbn}", response_model=BookDto)
async def create_full_update_book(
    isbn: str,
    book: BookSummaryDto,
    response: Response,
    service: BookService = Depends(get_book_service),
):
    saved, is_created = await service.create_update(isbn, book)
    response.status_code = (
        status.HTTP_201_CREATED if is_created else status.HTTP_200_OK
    )
    return to_book_dto(saved)


@router.get("", response_model=List[BookDto])
async def read_many_books(
    author: int | None = Query(None, description="Filter by author id"),
    service: BookService = Depends(get_book_service),
):
    return [to_book_dto(b) for b in await service.list(author_id=author)]


@router.get("/{isbn}", response_model=BookDto)
async def read_one_book(
    isbn: str,
    service: BookService = Depends(get_book_service),
):
    book = await service.get(isbn)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return to_book_dto(book)


@router.patch("/{isbn}", response_model=BookDto)
async def partial_update_book(
    isbn: str,
    update_request: BookUpdateRequest,
    service: BookService = Depends(get_book_service),
):
    updated = await service.partial_update(isbn, update_request)
    return to_book_dto(updated)


@router.delete("/{isbn}", status_code=204)
async def delete_book(
    isbn: str,
    service: BookService = Depends(get_book_service),
):
    await service.delete(isbn)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
