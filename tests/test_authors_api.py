import pytest

from factories import author_payload_a


async def _create_author(client, **overrides) -> dict:
    resp = await client.post("/v1/authors", json=author_payload_a(**overrides))
    assert resp.status_code == 201, f"create author failed: {resp.text}"
    return resp.json()


@pytest.mark.asyncio
async def test_create_author_returns_201(client):
    author = await _create_author(client)
    assert author["id"] is not None
    assert author["name"] == "John Doe"
    assert author["age"] == 40
    assert author["image"] == "author-image.jpeg"


@pytest.mark.asyncio
async def test_create_author_with_id_returns_400(client):
    resp = await client.post("/v1/authors", json=author_payload_a(id=999))
    assert resp.status_code == 400
    assert "id" in resp.json()["detail"]

    resp = await client.get("/v1/authors")
    assert resp.json() == []


@pytest.mark.asyncio
async def test_create_author_missing_field_returns_422(client):
    payload = author_payload_a()
    del payload["age"]
    resp = await client.post("/v1/authors", json=payload)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_read_many_authors(client):
    first = await _create_author(client)
    second = await _create_author(client, name="Don Joe")

    resp = await client.get("/v1/authors")
    assert resp.status_code == 200
    assert [a["id"] for a in resp.json()] == [first["id"], second["id"]]


@pytest.mark.asyncio
async def test_read_one_author(client):
    author = await _create_author(client)

    resp = await client.get(f"/v1/authors/{author['id']}")
    assert resp.status_code == 200
    assert resp.json() == author


@pytest.mark.asyncio
async def test_read_one_author_returns_404_when_absent(client):
    resp = await client.get("/v1/authors/999")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_full_update_author(client):
    author = await _create_author(client)
    replacement = author_payload_a(
        id=author["id"] + 50,
        name="Don Joe",
        age=65,
        description="Some other description",
        image="author-image-b.jpeg",
    )

    resp = await client.put(f"/v1/authors/{author['id']}", json=replacement)
    assert resp.status_code == 200
    assert resp.json() == {**replacement, "id": author["id"]}

    resp = await client.get(f"/v1/authors/{author['id']}")
    assert resp.json()["name"] == "Don Joe"


@pytest.mark.asyncio
async def test_full_update_missing_author_returns_400(client):
    resp = await client.put("/v1/authors/999", json=author_payload_a())
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_partial_update_author(client):
    author = await _create_author(client)

    resp = await client.patch(f"/v1/authors/{author['id']}", json={"age": 41})
    assert resp.status_code == 200
    assert resp.json() == {**author, "age": 41}


@pytest.mark.asyncio
async def test_partial_update_with_empty_body_changes_nothing(client):
    author = await _create_author(client)

    resp = await client.patch(f"/v1/authors/{author['id']}", json={})
    assert resp.status_code == 200
    assert resp.json() == author


@pytest.mark.asyncio
async def test_partial_update_explicit_null_returns_422(client):
    author = await _create_author(client)

    resp = await client.patch(f"/v1/authors/{author['id']}", json={"name": None})
    assert resp.status_code == 422

    resp = await client.get(f"/v1/authors/{author['id']}")
    assert resp.json() == author


@pytest.mark.asyncio
async def test_partial_update_missing_author_returns_400(client):
    resp = await client.patch("/v1/authors/999", json={"name": "Nobody"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_delete_author_returns_204_twice(client):
    author = await _create_author(client)

    for _ in range(2):
        resp = await client.delete(f"/v1/authors/{author['id']}")
        assert resp.status_code == 204

    resp = await client.get(f"/v1/authors/{author['id']}")
    assert resp.status_code == 404
