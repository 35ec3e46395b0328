from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from pydantic import BaseModel

from src.core.response import schemas

T = TypeVar("T", bound=SQLModel)


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class BaseRepository(Generic[T]):
    """Async CRUD over one SQLModel table, addressed by ``lookup_field``."""

    model: Type[T]
    lookup_field: str = "id"
    order_by: Optional[str] = None

    def __init__(self, get_session: Callable[..., AsyncSession]):
        self.get_session = get_session

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> None:
        """Handle database errors and raise appropriate exceptions."""
        if isinstance(error, IntegrityError):
            raise RepositoryError(
                f"Database integrity error during {operation}: {error}"
            ) from error
        else:
            raise RepositoryError(
                f"Database error during {operation}: {error}"
            ) from error

    def _lookup_column(self):
        return getattr(self.model, self.lookup_field)

    def _build_select_stmt(self, **filters) -> Any:
        """Build select statement with optional equality filters."""
        stmt = select(self.model)

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        if self.order_by:
            stmt = stmt.order_by(getattr(self.model, self.order_by))

        return stmt

    async def _get_for_update(self, db: AsyncSession, key: Any) -> Optional[T]:
        result = await db.exec(select(self.model).where(self._lookup_column() == key))
        return result.first()

    # ----------------- READ ----------------- #
    async def get(self, key: Any) -> Optional[T]:
        """Get a single item by its lookup key."""
        async with self.get_session() as db:
            try:
                stmt = select(self.model).where(self._lookup_column() == key)
                result = await db.exec(stmt)
                return result.first()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get")

    async def get_many(self, *, skip: int = 0, limit: int = 100, **filters) -> List[T]:  # type:ignore
        """Get multiple items with filtering and pagination."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters).offset(skip).limit(limit)
                result = await db.exec(stmt)
                return list(result.all())
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_many")

    async def list(
        self,
        page: int = 1,
        per_page: int = 10,
        **filters,
    ) -> schemas.PaginatedResponse:  # type:ignore
        """Get paginated list of items."""
        if page < 1:
            page = 1
        if per_page < 1 or per_page > 100:
            per_page = 10

        async with self.get_session() as db:
            try:
                offset = (page - 1) * per_page

                stmt = self._build_select_stmt(**filters)

                count_stmt = select(func.count()).select_from(stmt.subquery())
                total_result = await db.exec(count_stmt)
                total = total_result.one()

                result = await db.exec(stmt.offset(offset).limit(per_page))
                items = list(result.all())

                pages = (total + per_page - 1) // per_page  # Ceiling division

                return schemas.PaginatedResponse(
                    success=True,
                    data=items,
                    total=total,
                    page=page,
                    per_page=per_page,
                    pages=pages,
                    message="Items retrieved successfully",
                )
            except SQLAlchemyError as e:
                self._handle_db_error(e, "list")

    # ----------------- WRITE ----------------- #
    async def create(self, obj_in: Union[Dict[str, Any], BaseModel]) -> T:  # type:ignore
        """Create a new item."""
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump(exclude_unset=True)

        async with self.get_session() as db:
            try:
                obj = self.model(**obj_in)  # type: ignore
                db.add(obj)
                await db.commit()
                await db.refresh(obj)
                return obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "create")

    async def update(
        self,
        key: Any,
        obj_in: Union[Dict[str, Any], BaseModel],
        exclude_unset: bool = True,
    ) -> Optional[T]:
        """Update the item at ``key``. The lookup field itself may be changed."""
        if isinstance(obj_in, BaseModel):
            update_data = obj_in.model_dump(exclude_unset=exclude_unset)
        else:
            update_data = dict(obj_in)

        # Remove ID from update data to prevent changing primary key
        update_data.pop("id", None)

        if not update_data:
            raise RepositoryError("No data provided for update")

        async with self.get_session() as db:
            try:
                db_obj = await self._get_for_update(db, key)
                if not db_obj:
                    return None

                for field, value in update_data.items():
                    if hasattr(db_obj, field):
                        setattr(db_obj, field, value)

                db.add(db_obj)
                await db.commit()
                await db.refresh(db_obj)
                return db_obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "update")

    async def delete(self, key: Any) -> bool:  # type:ignore
        """Permanently delete the item at ``key``. Returns False when absent."""
        async with self.get_session() as db:
            try:
                db_obj = await self._get_for_update(db, key)
                if not db_obj:
                    return False

                await db.delete(db_obj)
                await db.commit()
                return True
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "delete")
