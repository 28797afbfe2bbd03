from pydantic import BaseModel, Field, field_validator
from typing import Any, List

class Product(BaseModel):
    title: str = ""
    category: str = ""
    # strict: a quoted or boolean price is a malformed payload, not a number; JSON integers still pass
    price: float = Field(0.0, strict=True, allow_inf_nan=False)
    thumbnail: str = ""
    description: str = ""

    model_config = {"frozen": True, "extra": "ignore"}  # immuable = safe

    @field_validator("title", "category", "thumbnail", "description", mode="before")
    @classmethod
    def _null_text(cls, v: Any) -> Any:
        # upstream sends null for unset text fields
        return "" if v is None else v

    @field_validator("price", mode="before")
    @classmethod
    def _null_price(cls, v: Any) -> Any:
        return 0.0 if v is None else v

class ProductsResponse(BaseModel):
    """Upstream payload: {"products": [...]} plus fields we do not use (total, skip, limit)."""
    products: List[Product] = []

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("products", mode="before")
    @classmethod
    def _null_products(cls, v: Any) -> Any:
        return [] if v is None else v
