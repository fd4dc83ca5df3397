import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Une los errores de pydantic en un solo mensaje: "campo: mensaje; ..."."""
    messages = []
    for error in exc.errors():
        # loc viene como ("body", "amount"); el prefijo "body" no aporta nada
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(messages)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
