# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.errors import ProductServiceError


def respond_with_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_service_error(request: Request, exc: ProductServiceError) -> JSONResponse:
    return respond_with_error(exc.status_code, exc.message)


def register_error_handlers(app: FastAPI) -> None:
    #InvalidRequest -> 400, ProductNotFound -> 404, StoreError -> 500
    app.add_exception_handler(ProductServiceError, handle_service_error)
