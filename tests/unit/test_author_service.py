"""
Tests for AuthorService.

The repository is replaced by an AsyncMock, so these tests cover only the
service rules: input mapping, pagination arguments and error translation.
"""

from datetime import date

import pytest
from prometheus_client import REGISTRY
from sqlalchemy.exc import IntegrityError, NoResultFound

from catalog.exceptions import NotFoundError
from catalog.models.author import Author
from catalog.schemas.author import CreateAuthorInput, UpdateAuthorInput
from catalog.services.author_service import AuthorService
from tests.mocks.repository_mocks import create_mock_author_repository


def _created_count() -> float:
    return (
        REGISTRY.get_sample_value(
            "catalog_entities_created_total", {"entity": "author"}
        )
        or 0.0
    )


@pytest.fixture
def repo():
    return create_mock_author_repository()


@pytest.fixture
def service(repo):
    return AuthorService(repo)


class TestAuthorServiceCreate:
    """Tests for author creation."""

    @pytest.mark.asyncio
    async def test_create_maps_input_to_model(self, service, repo):
        """Should persist an Author built from the validated input."""
        input_data = CreateAuthorInput(
            firstName="Jane", lastName="Austen", birthDate="1775-12-16"
        )

        created = await service.create(input_data)

        repo.create.assert_awaited_once()
        persisted = repo.create.await_args.args[0]
        assert isinstance(persisted, Author)
        assert persisted.first_name == "Jane"
        assert persisted.last_name == "Austen"
        assert persisted.birth_date == date(1775, 12, 16)
        assert persisted.bio is None
        assert created is persisted

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, service):
        """Created authors carry an id and timestamps before persistence."""
        created = await service.create(
            CreateAuthorInput(firstName="Leo", lastName="Tolstoy")
        )

        assert created.id
        assert created.created_at is not None
        assert created.updated_at is not None

    @pytest.mark.asyncio
    async def test_create_increments_metric(self, service):
        before = _created_count()

        await service.create(CreateAuthorInput(firstName="A", lastName="B"))

        assert _created_count() == before + 1


class TestAuthorServiceRead:
    """Tests for find_all and find_one."""

    @pytest.mark.asyncio
    async def test_find_all_defaults(self, service, repo):
        """Should request the first page of ten without a search term."""
        await service.find_all()

        repo.find_page.assert_awaited_once_with(1, 10, None)

    @pytest.mark.asyncio
    async def test_find_all_passes_page_limit_and_search(self, service, repo):
        authors = [Author(first_name="John", last_name="Doe")]
        repo.find_page.return_value = authors

        result = await service.find_all(page=2, limit=5, search="john")

        assert result == authors
        repo.find_page.assert_awaited_once_with(2, 5, "john")

    @pytest.mark.asyncio
    async def test_find_one_returns_author(self, service, repo):
        author = Author(first_name="Jane", last_name="Austen")
        repo.get_by_id.return_value = author

        assert await service.find_one(author.id) is author
        repo.get_by_id.assert_awaited_once_with(author.id)

    @pytest.mark.asyncio
    async def test_find_one_missing_raises_not_found(self, service):
        """Unknown ids yield NotFoundError with the id in the message."""
        with pytest.raises(NotFoundError) as exc_info:
            await service.find_one("missing-id")

        assert exc_info.value.message == 'Author with ID "missing-id" not found'
        assert exc_info.value.http_status == 404


class TestAuthorServiceUpdate:
    """Tests for partial updates."""

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(self, service, repo):
        """Fields absent from the request must not be touched."""
        updated = Author(first_name="Jane", last_name="Austen", bio="Novelist")
        repo.update.return_value = updated

        result = await service.update(
            updated.id, UpdateAuthorInput(bio="Novelist")
        )

        assert result is updated
        repo.update.assert_awaited_once_with(updated.id, {"bio": "Novelist"})

    @pytest.mark.asyncio
    async def test_update_allows_clearing_optional_field(self, service, repo):
        repo.update.return_value = Author(first_name="J", last_name="A")

        await service.update("author-1", UpdateAuthorInput(bio=None))

        repo.update.assert_awaited_once_with("author-1", {"bio": None})

    @pytest.mark.asyncio
    async def test_update_missing_row_raises_not_found(self, service, repo):
        """NoResultFound from the store becomes NotFoundError."""
        repo.update.side_effect = NoResultFound("no row")

        with pytest.raises(NotFoundError) as exc_info:
            await service.update("gone", UpdateAuthorInput(firstName="X"))

        assert exc_info.value.message == 'Author with ID "gone" not found'


class TestAuthorServiceRemove:
    """Tests for deletion."""

    @pytest.mark.asyncio
    async def test_remove_deletes_found_author(self, service, repo):
        author = Author(first_name="Jane", last_name="Austen")
        repo.get_by_id.return_value = author

        assert await service.remove(author.id) is None
        repo.delete.assert_awaited_once_with(author)

    @pytest.mark.asyncio
    async def test_remove_missing_raises_not_found(self, service, repo):
        with pytest.raises(NotFoundError):
            await service.remove("missing-id")

        repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remove_propagates_integrity_error(self, service, repo):
        """A foreign key failure is not translated."""
        repo.get_by_id.return_value = Author(first_name="J", last_name="A")
        repo.delete.side_effect = IntegrityError(
            "DELETE FROM author", {}, Exception("FOREIGN KEY constraint failed")
        )

        with pytest.raises(IntegrityError):
            await service.remove("author-1")
