"""
Exception handlers translating domain errors into the {ok, error} envelope
"""

import html
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from withdraw_receipts.core.errors import ErrorCode, ErrorMessage, ReceiptServiceError

logger = logging.getLogger(__name__)


def _wants_json(request: Request) -> bool:
    return request.url.path.startswith("/api/")


async def receipt_service_error_handler(request: Request, exc: ReceiptServiceError):
    if _wants_json(request):
        return JSONResponse(
            status_code=exc.status_code,
            content={"ok": False, "error": exc.message},
        )
    return HTMLResponse(
        f"<h1>{exc.status_code}</h1><p>{html.escape(exc.message)}</p>",
        status_code=exc.status_code,
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{ErrorCode.INVALID_BODY} on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"ok": False, "error": ErrorMessage.INVALID_BODY},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReceiptServiceError, receipt_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
