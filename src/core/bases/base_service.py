from typing import Any, Dict, Generic, TypeVar

from sqlmodel import SQLModel

from src.core.bases.base_repository import BaseRepository
from src.core.results import NotFound, Ok, ServiceResult

T = TypeVar("T", bound=SQLModel)


class BaseService(Generic[T]):
    """Base service: wraps a repository and reports outcomes as results."""

    not_found_message = "Item with key '{key}' not found"

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    def _not_found(self, key: Any) -> NotFound:
        return NotFound(detail=self.not_found_message.format(key=key))

    async def get(self, key: Any) -> ServiceResult:
        item = await self.repository.get(key)
        if item is None:
            return self._not_found(key)
        return Ok(item, message="Item retrieved successfully")

    async def get_list(self, page: int = 1, per_page: int = 10, **filters) -> ServiceResult:
        page_data = await self.repository.list(page=page, per_page=per_page, **filters)
        return Ok(page_data, message=page_data.message)

    async def create(self, create_data: Dict[str, Any]) -> ServiceResult:
        item = await self.repository.create(create_data)
        return Ok(item, message="Item created successfully")

    async def update(self, key: Any, update_data: Dict[str, Any]) -> ServiceResult:
        item = await self.repository.update(key, update_data)
        if item is None:
            return self._not_found(key)
        return Ok(item, message="Item updated successfully")

    async def delete(self, key: Any) -> ServiceResult:
        deleted = await self.repository.delete(key)
        return Ok(deleted, message="Item deleted" if deleted else "Nothing to delete")

