# app/repos/product_repo.py
from functools import wraps

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.errors import ProductNotFound, StoreError
from app.utils.logging import get_logger

logger = get_logger(__name__)


def backend_message(exc: SQLAlchemyError) -> str:
    #tekst bledu z drivera, bez opakowania SQLAlchemy
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


def store_call(fn):
    """Roll back and re-raise backend failures as StoreError."""

    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        try:
            return fn(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"{fn.__name__} failed: {e}")
            self.db.rollback()
            raise StoreError(backend_message(e)) from e

    return wrapper


class ProductRepo:
    """
    Mapowanie tabeli products na zapytania SQL.
    Wszystkie wartosci ida jako parametry, nigdy sklejane w tekst SQL.
    """

    def __init__(self, db: Session):
        self.db = db

    @store_call
    def get_product(self, product_id: int) -> ProductModel:
        product = self.db.get(ProductModel, product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    @store_call
    def create_product(self, name: str, price: float) -> ProductModel:
        product = ProductModel(name=name, price=price)
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    @store_call
    def update_product(self, product_id: int, name: str, price: float) -> int:
        # 0 rows affected is fine, caller reflects the payload back anyway
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(name=name, price=price)
        )
        self.db.commit()
        return result.rowcount

    @store_call
    def delete_product(self, product_id: int) -> int:
        result = self.db.execute(
            delete(ProductModel).where(ProductModel.id == product_id)
        )
        self.db.commit()
        return result.rowcount

    @store_call
    def list_products(self, start: int, count: int) -> list[ProductModel]:
        # no ORDER BY, row order is whatever the backend scan yields
        stmt = select(ProductModel).offset(start).limit(count)
        return list(self.db.execute(stmt).scalars().all())
