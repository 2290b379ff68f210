# minimal_apis/common/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Missing or malformed request bodies are reported as 400 Bad Request.
    A path parameter of the wrong type matches no resource, so it is a 404.
    """
    errors = exc.errors()
    if any(err.get("loc", ())[:1] == ("path",) for err in errors):
        logger.warning(f"No route for {request.method} {request.url.path}: invalid path parameter.")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"})

    logger.warning(f"Rejected {request.method} {request.url.path}: invalid request data.")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
