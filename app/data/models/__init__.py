#import modeli zeby SQLAlchemy zarejestrowal je w base metadata

from app.data.models.product import ProductModel

__all__ = ["ProductModel"]
