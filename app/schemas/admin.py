from pydantic import BaseModel, validator
from typing import List

from app.schemas.deal import DealResponse


class AdminLoginRequest(BaseModel):
    password: str


class AdminTokenResponse(BaseModel):
    admin_token: str
    token_type: str = "bearer"


class AdminDealForm(BaseModel):
    """État du formulaire de saisie, tel que tapé par l'admin"""

    store: str = ""
    product_name: str = ""
    category: str = ""
    sale_price: str = ""
    regular_price: str = ""
    unit: str = ""
    valid_from: str = ""
    valid_to: str = ""

    @validator("*", pre=True)
    def as_text(cls, v):
        if v is None:
            return ""
        return str(v)


class AdminDealSaveResponse(BaseModel):
    saved: bool = True
    deal: DealResponse
    form: AdminDealForm


class AdminOptionsResponse(BaseModel):
    stores: List[str]
    categories: List[str]
