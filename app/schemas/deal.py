from pydantic import BaseModel, Field, validator
from typing import Optional, List
from datetime import date

from app.utils.choices import STORES, CATEGORIES
from app.utils.validators import parse_price, validate_choice


class DealCreate(BaseModel):
    store: str
    product_name: str = Field(..., min_length=1, max_length=200)
    category: str
    sale_price: float = Field(..., ge=0)
    regular_price: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=50)
    valid_from: date
    valid_to: date

    @validator("store")
    def validate_store(cls, v):
        if not validate_choice(v, STORES):
            raise ValueError(f"Unknown store: {v}")
        return v

    @validator("category")
    def validate_category(cls, v):
        if not validate_choice(v, CATEGORIES):
            raise ValueError(f"Unknown category: {v}")
        return v

    @validator("product_name")
    def validate_product_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Product name cannot be empty")
        return v.strip()

    @validator("sale_price", "regular_price", pre=True)
    def coerce_price(cls, v):
        return parse_price(v)

    @validator("unit", pre=True)
    def empty_unit(cls, v):
        if v is None:
            return None
        return str(v).strip() or None

    @validator("valid_to")
    def validate_window(cls, v, values):
        valid_from = values.get("valid_from")
        if valid_from and v < valid_from:
            raise ValueError("valid_to must be on or after valid_from")
        return v


class DealResponse(BaseModel):
    id: int
    store: str
    product_name: str
    category: Optional[str]
    sale_price: float
    regular_price: Optional[float]
    unit: Optional[str]
    valid_from: date
    valid_to: date
    discount_percent: Optional[int] = None

    class Config:
        from_attributes = True


class DealGroup(BaseModel):
    category: str
    deals: List[DealResponse]


class FeedResponse(BaseModel):
    profile_name: Optional[str]
    today: date
    total: int
    stores: List[str]
    active_store: str
    groups: List[DealGroup]
