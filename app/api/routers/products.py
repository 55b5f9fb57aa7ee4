# app/api/routers/products.py
from fastapi import APIRouter, Depends

from app.api.dependencies import (
    get_service,
    lenient_int,
    product_id_param,
    product_payload,
)
from app.domain.schemas import ErrorOut, ProductIn, ProductOut, ResultOut
from app.services.product_service import ProductService

router = APIRouter(tags=["products"])

#koperta bledu {"error": ...} w OpenAPI
SERVER_ERROR = {500: {"model": ErrorOut}}
BAD_REQUEST = {400: {"model": ErrorOut}}
NOT_FOUND = {404: {"model": ErrorOut}}


@router.get("/products", response_model=list[ProductOut], responses=SERVER_ERROR)
def list_products(
    count: str | None = None,
    start: str | None = None,
    svc: ProductService = Depends(get_service),
):
    return svc.list_products(count=lenient_int(count), start=lenient_int(start))


@router.post(
    "/product",
    response_model=ProductOut,
    status_code=201,
    responses={**BAD_REQUEST, **SERVER_ERROR},
)
def create_product(
    payload: ProductIn = Depends(product_payload("Invalid request payload")),
    svc: ProductService = Depends(get_service),
):
    return svc.create_product(payload)


@router.get(
    "/product/{product_id:digits}",
    response_model=ProductOut,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
def get_product(
    product_id: int = Depends(product_id_param("Invalid product ID")),
    svc: ProductService = Depends(get_service),
):
    return svc.get_product(product_id)


@router.put(
    "/product/{product_id:digits}",
    response_model=ProductOut,
    responses={**BAD_REQUEST, **SERVER_ERROR},
)
def update_product(
    product_id: int = Depends(product_id_param("Invalid product ID")),
    payload: ProductIn = Depends(product_payload("Invalid resquest payload")),
    svc: ProductService = Depends(get_service),
):
    return svc.update_product(product_id, payload)


@router.delete(
    "/product/{product_id:digits}",
    response_model=ResultOut,
    responses={**BAD_REQUEST, **SERVER_ERROR},
)
def delete_product(
    product_id: int = Depends(product_id_param("Invalid Product ID")),
    svc: ProductService = Depends(get_service),
):
    return svc.delete_product(product_id)
