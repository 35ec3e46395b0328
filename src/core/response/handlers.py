import logging
from typing import Any, Dict, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse

from src.core import exceptions
from src.core.response.schemas import (
    BaseResponse,
    ErrorDetail,
    ErrorResponse,
    PaginatedResponse,
)

logger = logging.getLogger(__name__)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    body = BaseResponse[Any](data=data, message=message)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def paginated_response(
    items: List[Any],
    total: int,
    page: int,
    per_page: int,
    pages: int,
    message: Optional[str] = None,
) -> JSONResponse:
    body = PaginatedResponse[Any](
        data=items,
        total=total,
        page=page,
        per_page=per_page,
        pages=pages,
        message=message,
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(body))


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[List[Dict[str, Any]]] = None,
    errors: Optional[Dict[str, Optional[str]]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error_code=error_code,
        error_details=[ErrorDetail(**detail) for detail in details or []],
        errors=errors,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def unauthorized_exception_handler(
    request: Request, exc: exceptions.UnauthorizedException
) -> RedirectResponse:
    logger.info("Redirecting %s %s to %s", request.method, request.url.path, exc.redirect_to)
    return RedirectResponse(exc.redirect_to, status_code=status.HTTP_302_FOUND)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return error_response(
        error_code="INTERNAL_ERROR",
        message="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
