"""
Protocol classes for structural subtyping (duck typing with type safety).

Services depend on these protocols rather than on concrete repositories, so
tests can pass any object implementing the methods (e.g. an AsyncMock).

Example:
    ```python
    from catalog.protocols import Repository
    from catalog.models.author import Author


    async def load(repo: Repository[Author]) -> Author | None:
        return await repo.get_by_id("b4a1...")
    ```
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """
    Protocol for repository pattern.

    Defines the interface for data access objects that manage entities
    of type T.

    Type Parameters:
        T: The entity type this repository manages.
    """

    async def get_by_id(self, id: str) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        ...

    async def create(self, entity: T) -> T:
        """
        Create new entity in database.

        Args:
            entity: The entity instance to create.

        Returns:
            The created entity with generated fields populated.
        """
        ...

    async def update(self, id: str, values: dict[str, Any]) -> T:
        """
        Apply `values` to the entity with primary key `id`.

        Args:
            id: Primary key value.
            values: Field name and value pairs to change.

        Returns:
            The updated entity.

        Raises:
            NoResultFound: If no row has the given ID.
        """
        ...

    async def delete(self, entity: T) -> None:
        """
        Delete entity from database.

        Args:
            entity: The entity instance to delete.
        """
        ...

    async def exists(self, **filters: Any) -> bool:
        """
        Check if entity exists matching the provided filters.

        Args:
            **filters: Field name and value pairs to filter by.

        Returns:
            True if at least one entity matches, False otherwise.
        """
        ...
