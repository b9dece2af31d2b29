"""Tests for the /books endpoints through the full application stack."""

import pytest

from tests.mocks.sample_data import (
    BAD_CHECKSUM_ISBN_13,
    OTHER_ISBN_13,
    THIRD_ISBN_13,
    VALID_ISBN_10,
    VALID_ISBN_13,
)


async def _create_author(client, first_name="Jane", last_name="Austen"):
    response = await client.post(
        "/authors", json={"firstName": first_name, "lastName": last_name}
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _create_book(client, author_id, **overrides):
    payload = {
        "title": "Pride and Prejudice",
        "isbn": VALID_ISBN_13,
        "authorId": author_id,
    }
    payload.update(overrides)
    response = await client.post("/books", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateBook:
    @pytest.mark.asyncio
    async def test_create_returns_book_with_author(self, client):
        author = await _create_author(client)

        response = await client.post(
            "/books",
            json={
                "title": "Pride and Prejudice",
                "isbn": VALID_ISBN_13,
                "publishedDate": "1813-01-28",
                "genre": "Novel",
                "authorId": author["id"],
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["title"] == "Pride and Prejudice"
        assert body["isbn"] == VALID_ISBN_13
        assert body["publishedDate"] == "1813-01-28"
        assert body["genre"] == "Novel"
        assert body["authorId"] == author["id"]
        assert body["author"]["id"] == author["id"]
        assert body["author"]["lastName"] == "Austen"

    @pytest.mark.asyncio
    async def test_isbn_10_accepted(self, client):
        author = await _create_author(client)

        body = await _create_book(client, author["id"], isbn=VALID_ISBN_10)

        assert body["isbn"] == VALID_ISBN_10

    @pytest.mark.asyncio
    async def test_unknown_author_is_400_and_not_inserted(self, client):
        response = await client.post(
            "/books",
            json={"title": "Orphan", "isbn": VALID_ISBN_13, "authorId": "ghost"},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["msg"] == 'Author with ID "ghost" does not exist.'
        assert error["details"] == {"field": "authorId"}
        listing = await client.get("/books")
        assert listing.json() == []

    @pytest.mark.asyncio
    async def test_duplicate_isbn_is_400_naming_isbn(self, client):
        author = await _create_author(client)
        await _create_book(client, author["id"])

        response = await client.post(
            "/books",
            json={"title": "Copy", "isbn": VALID_ISBN_13, "authorId": author["id"]},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["msg"] == f'Book with ISBN "{VALID_ISBN_13}" already exists.'
        assert error["details"] == {"field": "isbn"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"isbn": BAD_CHECKSUM_ISBN_13},
            {"isbn": "not-an-isbn"},
            {"title": ""},
            {"publishedDate": "28-01-1813"},
            {"rating": 5},
        ],
    )
    async def test_invalid_payload_is_400(self, client, overrides):
        author = await _create_author(client)
        payload = {
            "title": "Pride and Prejudice",
            "isbn": VALID_ISBN_13,
            "authorId": author["id"],
        }
        payload.update(overrides)

        response = await client.post("/books", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "validation_error"


class TestListBooks:
    @pytest.mark.asyncio
    async def test_filter_search_and_paging(self, client):
        austen = await _create_author(client)
        orwell = await _create_author(client, "George", "Orwell")
        await _create_book(client, austen["id"])
        await _create_book(client, austen["id"], title="Emma", isbn=OTHER_ISBN_13)
        await _create_book(client, orwell["id"], title="1984", isbn=THIRD_ISBN_13)

        everything = await client.get("/books")
        by_author = await client.get("/books", params={"authorId": austen["id"]})
        by_title = await client.get("/books", params={"search": "EMMA"})
        by_isbn = await client.get("/books", params={"search": "0451524935"})
        second_page = await client.get("/books", params={"page": 2, "limit": 2})

        assert len(everything.json()) == 3
        assert all(b["author"] is not None for b in everything.json())
        assert {b["title"] for b in by_author.json()} == {
            "Pride and Prejudice",
            "Emma",
        }
        assert [b["title"] for b in by_title.json()] == ["Emma"]
        assert [b["title"] for b in by_isbn.json()] == ["1984"]
        assert len(second_page.json()) == 1

    @pytest.mark.asyncio
    async def test_limit_above_maximum_is_400(self, client):
        response = await client.get("/books", params={"limit": 1000})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_page_offset_beyond_64_bits_is_400(self, client):
        response = await client.get(
            "/books", params={"page": 100_000_000_000_000_000, "limit": 100}
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "validation_error"


class TestGetBook:
    @pytest.mark.asyncio
    async def test_get_includes_author(self, client):
        author = await _create_author(client)
        created = await _create_book(client, author["id"])

        response = await client.get(f"/books/{created['id']}")

        assert response.status_code == 200
        assert response.json()["author"]["firstName"] == "Jane"

    @pytest.mark.asyncio
    async def test_get_missing_is_404(self, client):
        response = await client.get("/books/does-not-exist")

        assert response.status_code == 404
        assert response.json()["error"]["msg"] == (
            'Book with ID "does-not-exist" not found'
        )


class TestUpdateBook:
    @pytest.mark.asyncio
    async def test_partial_update(self, client):
        author = await _create_author(client)
        created = await _create_book(client, author["id"], genre="Novel")

        response = await client.patch(
            f"/books/{created['id']}", json={"genre": "Romance"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["genre"] == "Romance"
        assert body["title"] == "Pride and Prejudice"
        assert body["author"]["id"] == author["id"]

    @pytest.mark.asyncio
    async def test_move_to_other_author(self, client):
        austen = await _create_author(client)
        bronte = await _create_author(client, "Charlotte", "Brontë")
        created = await _create_book(client, austen["id"])

        response = await client.patch(
            f"/books/{created['id']}", json={"authorId": bronte["id"]}
        )

        assert response.status_code == 200
        assert response.json()["authorId"] == bronte["id"]
        assert response.json()["author"]["lastName"] == "Brontë"

    @pytest.mark.asyncio
    async def test_unknown_author_leaves_book_unchanged(self, client):
        author = await _create_author(client)
        created = await _create_book(client, author["id"])

        response = await client.patch(
            f"/books/{created['id']}",
            json={"authorId": "ghost", "title": "Changed"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"field": "authorId"}
        unchanged = await client.get(f"/books/{created['id']}")
        assert unchanged.json()["title"] == "Pride and Prejudice"

    @pytest.mark.asyncio
    async def test_isbn_collision_is_400(self, client):
        author = await _create_author(client)
        await _create_book(client, author["id"])
        other = await _create_book(
            client, author["id"], title="Emma", isbn=OTHER_ISBN_13
        )

        response = await client.patch(
            f"/books/{other['id']}", json={"isbn": VALID_ISBN_13}
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"field": "isbn"}

    @pytest.mark.asyncio
    async def test_update_missing_is_404(self, client):
        response = await client.patch("/books/nope", json={"genre": "Drama"})

        assert response.status_code == 404


class TestDeleteBook:
    @pytest.mark.asyncio
    async def test_delete_returns_204(self, client):
        author = await _create_author(client)
        created = await _create_book(client, author["id"])

        response = await client.delete(f"/books/{created['id']}")

        assert response.status_code == 204
        missing = await client.get(f"/books/{created['id']}")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_is_404(self, client):
        response = await client.delete("/books/does-not-exist")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_author_deletable_after_books_removed(self, client):
        author = await _create_author(client)
        created = await _create_book(client, author["id"])
        await client.delete(f"/books/{created['id']}")

        response = await client.delete(f"/authors/{author['id']}")

        assert response.status_code == 204
