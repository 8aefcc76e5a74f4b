from typing import Union

from app.schemas.admin import AdminDealForm
from app.schemas.deal import DealCreate

# Champs conservés d'une saisie à l'autre (même circulaire, même magasin)
RETAINED_FIELDS = ("store", "category", "valid_from", "valid_to")


def form_from_deal(deal: DealCreate) -> AdminDealForm:
    return AdminDealForm(
        store=deal.store,
        product_name=deal.product_name,
        category=deal.category,
        sale_price=f"{deal.sale_price:.2f}",
        regular_price=(
            f"{deal.regular_price:.2f}" if deal.regular_price is not None else ""
        ),
        unit=deal.unit or "",
        valid_from=deal.valid_from.isoformat(),
        valid_to=deal.valid_to.isoformat(),
    )


def reset_after_save(form: Union[AdminDealForm, DealCreate]) -> AdminDealForm:
    """Vide produit, prix et unité; garde magasin, catégorie et dates"""
    if isinstance(form, DealCreate):
        form = form_from_deal(form)

    return AdminDealForm(**{field: getattr(form, field) for field in RETAINED_FIELDS})
