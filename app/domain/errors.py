# app/domain/errors.py


class ProductServiceError(Exception):
    """Base for every error the product service reports to a client."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(ProductServiceError):
    """Malformed id or body. Always a 400 with a fixed message."""

    status_code = 400


class ProductNotFound(ProductServiceError):
    status_code = 404

    def __init__(self, product_id: int):
        super().__init__("Product not found")
        self.product_id = product_id


class StoreError(ProductServiceError):
    """Any other backend failure. The message is the backend's own text."""

    status_code = 500
