"""
Async seeding script to populate the running API with authors and books.

Usage:
    python scripts/seed_async.py --authors 20 --books 50 --base-url http://localhost:8000

The API must be running and reachable at the provided base URL.
"""

import argparse
import asyncio
import os
import random
import uuid

import httpx

DEFAULT_BASE_URL = os.getenv("SEED_BASE_URL", "http://localhost:8000")


def _isbn() -> str:
    # 978-XXX-XXXXXX-XXXX, same shape as the sample catalog
    digits = f"{uuid.uuid4().int % 10**13:013d}"
    return f"978-{digits[:3]}-{digits[3:9]}-{digits[9:]}"


async def create_author(client: httpx.AsyncClient, name: str, age: int) -> int:
    resp = await client.post(
        "/v1/authors",
        json={
            "name": name,
            "age": age,
            "description": "seeded via scripts/seed_async.py",
            "image": "author-image.jpeg",
        },
    )
    resp.raise_for_status()
    return resp.json()["id"]


async def upsert_book(client: httpx.AsyncClient, title: str, author_id: int) -> str:
    isbn = _isbn()
    payload = {
        "title": title,
        "description": "seeded via scripts/seed_async.py",
        "image": "book-image.jpeg",
        "author": {"id": author_id},
    }
    resp = await client.put(f"/v1/books/{isbn}", json=payload)
    resp.raise_for_status()
    return resp.json()["isbn"]


async def seed(base_url: str, authors: int, books: int):
    async with httpx.AsyncClient(base_url=base_url, timeout=30.0) as client:
        author_ids: list[int] = []
        for idx in range(authors):
            suffix = uuid.uuid4().hex[:6]
            author_id = await create_author(
                client,
                name=f"Seed Author {idx}-{suffix}",
                age=random.randint(20, 90),
            )
            author_ids.append(author_id)

        if not author_ids:
            print("No authors created; skipping book creation.")
            return

        created_books: list[str] = []
        for idx in range(books):
            suffix = uuid.uuid4().hex[:6]
            isbn = await upsert_book(
                client,
                title=f"Seed Book {idx}-{suffix}",
                author_id=random.choice(author_ids),
            )
            created_books.append(isbn)

    print(
        f"Seeded {len(author_ids)} authors and {len(created_books)} books to {base_url}"
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Async seeder for the Catalog API")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    parser.add_argument("--authors", type=int, default=10, help="Number of authors to create")
    parser.add_argument("--books", type=int, default=20, help="Number of books to create")
    return parser.parse_args()


def main():
    args = parse_args()
    asyncio.run(seed(base_url=args.base_url, authors=args.authors, books=args.books))


if __name__ == "__main__":
    main()
