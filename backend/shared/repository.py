"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the row-to-model mapping hook.
"""

from typing import Any, Callable, Generic, Optional, TypeVar

from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for Supabase-backed repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Pass either a client or a `client_factory`. A factory is only called
    on the first query, so a missing configuration surfaces inside the
    query's own error handling rather than at construction.

    Subclasses name their table and implement _map_row to turn a raw
    row dict into their Pydantic model.

    Example:
        class ProfileRepository(BaseRepository[Profile]):
            table = "users"

            def _map_row(self, row):
                return Profile.model_validate(row)
    """

    table: str = ""

    def __init__(
        self,
        db: Optional[Client] = None,
        table: str = "",
        client_factory: Optional[Callable[[], Client]] = None,
    ) -> None:
        """
        Initialize the repository.

        Args:
            db: Supabase client instance for database operations.
            table: Optional table name overriding the class default.
            client_factory: Creates the client on first use, instead of `db`.
        """
        if db is None and client_factory is None:
            raise ValueError("BaseRepository needs a client or a client_factory")
        self._client = db
        self._client_factory = client_factory
        if table:
            self.table = table

    @property
    def _db(self) -> Client:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def _query(self):
        """Start a query builder on this repository's table."""
        return self._db.table(self.table)

    def _first(self, rows: list[dict[str, Any]]) -> T | None:
        """Map the first row of a result, or None when there are no rows."""
        if not rows:
            return None
        return self._map_row(rows[0])

    def _map_row(self, row: dict[str, Any]) -> T:
        raise NotImplementedError
