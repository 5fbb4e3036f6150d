"""에러 핸들링: 입력 오류는 400, 그 외 처리되지 않은 예외는 500."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from ..services.consumption_report import ReportValidationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """전역 예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid request",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(ReportValidationError)
    async def report_validation_handler(_: Request, exc: ReportValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message, "code": exc.code, "field": exc.field},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(_: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        from ..config.settings import settings
        detail = "Internal server error"
        if settings.debug:
            detail = f"{type(exc).__name__}: {str(exc)}"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": detail},
        )
