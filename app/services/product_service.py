# app/services/product_service.py
from sqlalchemy.orm import Session

from app.domain.schemas import ProductIn, ProductOut, ResultOut
from app.repos.product_repo import ProductRepo
from app.utils.settings import MAX_PAGE_SIZE
from app.utils.logging import get_logger

logger = get_logger(__name__)


def clamp_page(count: int, start: int) -> tuple[int, int]:
    """
    Bounds for the listing query.

    count outside [1, MAX_PAGE_SIZE] falls back to MAX_PAGE_SIZE,
    a negative start becomes 0.
    """
    if count > MAX_PAGE_SIZE or count < 1:
        count = MAX_PAGE_SIZE
    if start < 0:
        start = 0
    return count, start


class ProductService:
    """
    Use case'y dla produktow, kazdy robi dokladnie jedna operacje na bazie.
    query: get, list
    commands: create, update, delete
    """

    def __init__(self, db: Session, repo: ProductRepo | None = None):
        self.repo = repo or ProductRepo(db)

    #query
    def get_product(self, product_id: int) -> ProductOut:
        product = self.repo.get_product(product_id)
        return ProductOut.model_validate(product)

    def list_products(self, count: int, start: int) -> list[ProductOut]:
        count, start = clamp_page(count, start)
        products = self.repo.list_products(start=start, count=count)
        return [ProductOut.model_validate(p) for p in products]

    #commands
    def create_product(self, payload: ProductIn) -> ProductOut:
        created = self.repo.create_product(payload.name, payload.price)
        logger.info(f"Utworzono produkt {created.id}")
        return ProductOut.model_validate(created)

    def update_product(self, product_id: int, payload: ProductIn) -> ProductOut:
        # id z body jest ignorowane, liczy sie tylko id ze sciezki
        rowcount = self.repo.update_product(product_id, payload.name, payload.price)
        logger.info(f"Update produktu {product_id}, rows affected: {rowcount}")
        return ProductOut(id=product_id, name=payload.name, price=payload.price)

    def delete_product(self, product_id: int) -> ResultOut:
        rowcount = self.repo.delete_product(product_id)
        logger.info(f"Delete produktu {product_id}, rows affected: {rowcount}")
        return ResultOut()
