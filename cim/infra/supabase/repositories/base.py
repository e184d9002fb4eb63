"""Base repository with common CRUD operations"""
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel
from supabase import Client  # type: ignore

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)


class BaseRepository(Generic[T, CreateT, UpdateT]):
    """
    Base repository providing common database operations.
    Hides Supabase implementation details from the rest of the application.

    Every table is owned by a user through its ``user_id`` column. Errors
    from the backend are not caught here; callers decide how to report them.
    """

    # Column list used for reads; joined repositories embed related rows here
    select_columns: str = "*"
    # Default ordering for a user's collection as (column, descending) pairs
    order_by: Sequence[Tuple[str, bool]] = ()

    def __init__(self, client: Client, table_name: str, model_class: Type[T]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class

    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert database dict to domain model"""
        return self._model_class(**data)

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        """Convert list of database dicts to domain models"""
        return [self._to_model(item) for item in data]

    def _select(self):
        return self._client.table(self._table_name).select(self.select_columns)

    @property
    def is_joined(self) -> bool:
        return self.select_columns != "*"

    async def find_by_id(self, id: str) -> Optional[T]:
        """Find a single record by ID"""
        response = self._select().eq("id", id).execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def find_by_user(self, user_id: str) -> List[T]:
        """Find every record owned by a user, in the repository's default order"""
        query = self._select().eq("user_id", user_id)

        for column, desc in self.order_by:
            query = query.order(column, desc=desc)

        response = query.execute()
        return self._to_models(response.data or [])

    async def find_by_filters(self, filters: Dict[str, Any]) -> List[T]:
        """Find records matching filters"""
        query = self._select()

        for key, value in filters.items():
            query = query.eq(key, value)

        for column, desc in self.order_by:
            query = query.order(column, desc=desc)

        response = query.execute()
        return self._to_models(response.data or [])

    async def create(self, user_id: str, data: CreateT) -> T:
        """
        Create a new record owned by ``user_id``.

        Unset optional fields are sent as explicit nulls so the stored row
        matches what was supplied.
        """
        data_dict = data.model_dump(mode='json')
        data_dict["user_id"] = user_id
        response = self._client.table(self._table_name).insert(data_dict).execute()

        if not response.data:
            raise ValueError(f"Failed to create {self._table_name} record")

        row = response.data[0]
        if self.is_joined:
            # Inserts cannot embed related rows; read the record back with its joins
            joined = await self.find_by_id(row["id"])
            if joined is not None:
                return joined

        return self._to_model(row)

    async def update(self, id: str, data: UpdateT) -> Optional[T]:
        """Update a record by ID, sending only the fields that were set"""
        data_dict = data.model_dump(exclude_unset=True, mode='json')

        if not data_dict:
            # No fields to update
            return await self.find_by_id(id)

        response = self._client.table(self._table_name).update(data_dict).eq("id", id).execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def delete(self, id: str) -> bool:
        """Delete a record by ID"""
        response = self._client.table(self._table_name).delete().eq("id", id).execute()
        return len(response.data or []) > 0
