# app/domain/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    """Body for creating or overwriting a product."""

    model_config = ConfigDict(extra="forbid")

    # strict: no string-to-number coercion, no NaN or Infinity
    name: str = Field(strict=True)
    price: float = Field(strict=True, allow_inf_nan=False)
    # accepted but never used, the id always comes from the store or the path
    id: int | None = Field(default=None, exclude=True)


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
    price: float

    model_config = ConfigDict(from_attributes=True)


class ResultOut(BaseModel):
    result: str = "success"


class ErrorOut(BaseModel):
    error: str
