# app/api/dependencies.py
from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette.convertors import Convertor, register_url_convertor

from app.data.database import get_db
from app.domain.errors import InvalidRequest
from app.domain.schemas import ProductIn
from app.services.product_service import ProductService
from app.utils.settings import INT64_MAX, INT64_MIN, MAX_PRODUCT_ID


class DigitsConvertor(Convertor):
    """Path segment of ASCII digits, handed over as the raw string."""

    regex = "[0-9]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value) -> str:
        return str(value)


register_url_convertor("digits", DigitsConvertor())


def get_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def parse_product_id(raw: str, message: str) -> int:
    try:
        product_id = int(raw)
    except (TypeError, ValueError):
        raise InvalidRequest(message)
    if product_id < 0 or product_id > MAX_PRODUCT_ID:
        raise InvalidRequest(message)
    return product_id


def product_id_param(message: str):
    """Dependency parsing the {product_id} path segment, failing with `message`."""

    def dependency(product_id: str) -> int:
        return parse_product_id(product_id, message)

    return dependency


def product_payload(message: str):
    """Dependency decoding the JSON body into ProductIn, failing with `message`."""

    async def dependency(request: Request) -> ProductIn:
        raw = await request.body()
        try:
            return ProductIn.model_validate_json(raw)
        except ValidationError:
            raise InvalidRequest(message)

    return dependency


def lenient_int(value: str | None) -> int:
    #brak albo smieci w query -> 0, potem i tak jest clamp
    if value is None:
        return 0
    try:
        number = int(value)
    except ValueError:
        return 0
    # saturate to the 64-bit range the driver can bind
    return max(INT64_MIN, min(number, INT64_MAX))
