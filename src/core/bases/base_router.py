from typing import Any, Callable, List, Optional

from fastapi import APIRouter, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import RedirectResponse, Response

from src.core.bases.base_service import BaseService
from src.core.response.handlers import error_response, paginated_response, success_response
from src.core.response.schemas import PaginatedResponse
from src.core.results import Invalid, NotFound, Ok, Redirect, ServiceResult


class BaseRouter:
    """Base router: owns an APIRouter and turns service results into responses."""

    def __init__(
        self,
        service: Optional[BaseService] = None,
        tags: Optional[List[str]] = None,
        prefix: str = "",
        dependencies: Optional[List[Any]] = None,
    ):
        self.service = service
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix

        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags,  # type:ignore
            dependencies=dependencies or [],
        )

        self._register_routes()

    def _register_routes(self) -> None:
        """Register routes. Subclasses override."""
        raise NotImplementedError

    def respond(
        self,
        result: ServiceResult,
        status_code: int = status.HTTP_200_OK,
        serializer: Optional[Callable[[Any], Any]] = None,
    ) -> Response:
        """Map a service result onto the matching response shape."""
        if isinstance(result, Redirect):
            return RedirectResponse(result.location, status_code=status.HTTP_302_FOUND)

        if isinstance(result, NotFound):
            return error_response(
                error_code="NOT_FOUND",
                message=result.detail,
                status_code=status.HTTP_404_NOT_FOUND,
            )

        if isinstance(result, Invalid):
            return error_response(
                error_code="VALIDATION_ERROR",
                message=result.detail,
                status_code=status.HTTP_400_BAD_REQUEST,
                details=[
                    {"field": field, "code": "INVALID", "message": message}
                    for field, message in result.errors.items()
                    if message
                ],
                errors=result.errors,
            )

        if isinstance(result, Ok):
            data = result.data
            if isinstance(data, PaginatedResponse):
                items = [serializer(item) for item in data.data] if serializer else data.data
                return paginated_response(
                    items=jsonable_encoder(items),
                    total=data.total,
                    page=data.page,
                    per_page=data.per_page,
                    pages=data.pages,
                    message=result.message,
                )
            if serializer:
                data = serializer(data)
            return success_response(data=data, message=result.message, status_code=status_code)

        raise TypeError(f"Unsupported service result: {result!r}")

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
