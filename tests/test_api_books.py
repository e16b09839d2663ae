"""
Tests for the books API endpoints.

Routing and error mapping are checked with a mocked service;
full request flows run against a temporary SQLite database.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from books_api.application.books.dtos import BookRequest, BookResponse
from books_api.domain.books.errors import BookConflictError, BookNotFoundError
from books_api.domain.books.pricing import PRICE_PATTERN_TEXT

BOOK_JSON = {"name": "nameTest", "author": "authorTest", "price": "9.99"}
BOOK_RESPONSE = BookResponse(id="1", name="nameTest", author="authorTest", price="9.99")
BOOK_REQUEST = BookRequest(name="nameTest", author="authorTest", price=Decimal("9.99"))


class TestFindAllBooksEndpoint:
    """Tests for GET /books."""

    def test_returns_book_list(self, mocked_client: TestClient, mock_service: MagicMock) -> None:
        """GET /books returns every book."""
        mock_service.find_all_books.return_value = [BOOK_RESPONSE]

        response = mocked_client.get("/books")

        assert response.status_code == 200
        assert response.json() == [{"id": "1", **BOOK_JSON}]
        mock_service.find_all_books.assert_called_once_with()

    def test_returns_empty_list(self, mocked_client: TestClient, mock_service: MagicMock) -> None:
        """GET /books returns an empty array when there are no books."""
        mock_service.find_all_books.return_value = []

        response = mocked_client.get("/books")

        assert response.status_code == 200
        assert response.json() == []


class TestFindByAuthorEndpoint:
    """Tests for GET /books/author/{author}."""

    def test_returns_books_by_author(
        self, mocked_client: TestClient, mock_service: MagicMock
    ) -> None:
        """GET /books/author/{author} returns that author's books."""
        mock_service.find_by_author.return_value = [BOOK_RESPONSE]

        response = mocked_client.get("/books/author/authorTest")

        assert response.status_code == 200
        assert response.json() == [{"id": "1", **BOOK_JSON}]
        mock_service.find_by_author.assert_called_once_with("authorTest")

    def test_unknown_author_returns_empty_list(
        self, mocked_client: TestClient, mock_service: MagicMock
    ) -> None:
        """An author with no books yields an empty list."""
        mock_service.find_by_author.return_value = []

        response = mocked_client.get("/books/author/Nonexistent Author")

        assert response.status_code == 200
        assert response.json() == []
        mock_service.find_by_author.assert_called_once_with("Nonexistent Author")


class TestCreateBookEndpoint:
    """Tests for POST /books."""

    def test_returns_created_book(self, mocked_client: TestClient, mock_service: MagicMock) -> None:
        """POST /books returns the created book."""
        mock_service.create_book.return_value = BOOK_RESPONSE

        response = mocked_client.post("/books", json=BOOK_JSON)

        assert response.status_code == 200
        assert response.json() == {"id": "1", **BOOK_JSON}
        mock_service.create_book.assert_called_once_with(BOOK_REQUEST)

    def test_missing_fields_become_none(
        self, mocked_client: TestClient, mock_service: MagicMock
    ) -> None:
        """An empty body creates a book with null fields."""
        mock_service.create_book.return_value = BookResponse(
            id="1", name=None, author=None, price=None
        )

        response = mocked_client.post("/books", json={})

        assert response.status_code == 200
        mock_service.create_book.assert_called_once_with(BookRequest())

    def test_invalid_price_rejected(
        self, mocked_client: TestClient, mock_service: MagicMock
    ) -> None:
        """A malformed price returns 422 with an error body."""
        response = mocked_client.post("/books", json={**BOOK_JSON, "price": "cheap"})

        assert response.status_code == 422
        assert response.json() == {"error": "Invalid price: cheap"}
        mock_service.create_book.assert_not_called()


class TestUpdateBookEndpoint:
    """Tests for PUT /books/{id}."""

    def test_returns_updated_book(self, mocked_client: TestClient, mock_service: MagicMock) -> None:
        """PUT /books/{id} returns the updated book."""
        mock_service.update_book.return_value = BOOK_RESPONSE

        response = mocked_client.put("/books/1", json=BOOK_JSON)

        assert response.status_code == 200
        assert response.json() == {"id": "1", **BOOK_JSON}
        mock_service.update_book.assert_called_once_with("1", BOOK_REQUEST)

    def test_not_found_maps_to_404(self, mocked_client: TestClient, mock_service: MagicMock) -> None:
        """BookNotFoundError becomes a 404 error body."""
        mock_service.update_book.side_effect = BookNotFoundError("1")

        response = mocked_client.put("/books/1", json=BOOK_JSON)

        assert response.status_code == 404
        assert response.json() == {"error": "No Book found by id: 1"}

    def test_conflict_maps_to_409(self, mocked_client: TestClient, mock_service: MagicMock) -> None:
        """BookConflictError becomes a 409 error body."""
        mock_service.update_book.side_effect = BookConflictError("1")

        response = mocked_client.put("/books/1", json=BOOK_JSON)

        assert response.status_code == 409
        assert response.json() == {"error": "Book 1 was modified concurrently"}


class TestDeleteBookEndpoint:
    """Tests for DELETE /books/{id}."""

    def test_returns_empty_200(self, mocked_client: TestClient, mock_service: MagicMock) -> None:
        """DELETE /books/{id} returns 200 with an empty body."""
        response = mocked_client.delete("/books/1")

        assert response.status_code == 200
        assert response.content == b""
        mock_service.delete_book.assert_called_once_with("1")


class TestBookLifecycle:
    """End-to-end flows through the real service and database."""

    def test_create_update_and_missing_update(self, client: TestClient) -> None:
        """Create, update, then update of a missing id."""
        created = client.post(
            "/books", json={"name": "Dune", "author": "Herbert", "price": "9.99"}
        )
        assert created.status_code == 200
        book = created.json()
        assert book["id"]
        assert (book["name"], book["author"], book["price"]) == ("Dune", "Herbert", "9.99")

        updated = client.put(
            f"/books/{book['id']}",
            json={"name": "Dune (2nd ed)", "author": "Herbert", "price": "12.00"},
        )
        assert updated.status_code == 200
        assert updated.json() == {
            "id": book["id"],
            "name": "Dune (2nd ed)",
            "author": "Herbert",
            "price": "12.00",
        }
        assert client.get("/books").json() == [updated.json()]

        missing = client.put("/books/does-not-exist", json={"name": "x"})
        assert missing.status_code == 404
        assert missing.json() == {"error": "No Book found by id: does-not-exist"}
        assert len(client.get("/books").json()) == 1

    def test_find_by_author_filters_exactly(self, client: TestClient) -> None:
        """Author lookup returns only exact matches."""
        client.post("/books", json={"name": "Dune", "author": "Herbert"})
        client.post("/books", json={"name": "Emma", "author": "Austen"})

        result = client.get("/books/author/Herbert").json()

        assert [b["name"] for b in result] == ["Dune"]
        assert client.get("/books/author/Tolkien").json() == []

    def test_delete_is_idempotent(self, client: TestClient) -> None:
        """Deleting the same id twice returns 200 both times."""
        book_id = client.post("/books", json={"name": "Dune"}).json()["id"]

        assert client.delete(f"/books/{book_id}").status_code == 200
        assert client.get("/books").json() == []
        assert client.delete(f"/books/{book_id}").status_code == 200


class TestPriceRoundTrip:
    """Prices sent over HTTP come back unchanged."""

    @pytest.mark.parametrize("price", ["9.99", "12.00", "150", "0", "0.0000001"])
    def test_price_returned_as_sent(self, client: TestClient, price: str) -> None:
        """Created and re-read books echo the exact price text."""
        created = client.post("/books", json={"name": "Dune", "price": price})

        assert created.status_code == 200
        assert created.json()["price"] == price
        assert client.get("/books").json()[0]["price"] == price

    def test_returned_price_can_be_sent_back(self, client: TestClient) -> None:
        """A price read from the API is accepted on update."""
        book = client.post("/books", json={"name": "Dune", "price": "0.0000001"}).json()

        updated = client.put(
            f"/books/{book['id']}", json={"name": "Dune", "price": book["price"]}
        )

        assert updated.status_code == 200
        assert updated.json()["price"] == "0.0000001"

    @pytest.mark.parametrize("price", ["007.50", "١٢.50", " 9.99 "])
    def test_non_canonical_price_rejected(self, client: TestClient, price: str) -> None:
        """Leading zeros, non-ASCII digits and padding are refused."""
        response = client.post("/books", json={"name": "Dune", "price": price})

        assert response.status_code == 422
        assert response.json() == {"error": f"Invalid price: {price}"}
        assert client.get("/books").json() == []

    def test_price_format_published_in_openapi(self, client: TestClient) -> None:
        """The request schema documents the accepted price pattern."""
        schema = client.get("/openapi.json").json()

        price = schema["components"]["schemas"]["BookRequestSchema"]["properties"]["price"]
        assert price["pattern"] == PRICE_PATTERN_TEXT
