from typing import Optional, List, Dict, Any
import math

from app.utils.choices import ALL_STORES, DEFAULT_CATEGORY


def _field(deal: Any, name: str):
    if isinstance(deal, dict):
        return deal.get(name)
    return getattr(deal, name, None)


def get_discount(sale_price, regular_price) -> Optional[int]:
    """
    Pourcentage d'économie arrondi à l'entier (demi vers le haut)

    Returns:
        None si le prix de vente ou le prix régulier est absent (ou nul)
    """
    if not regular_price or not sale_price:
        return None

    regular = float(regular_price)
    sale = float(sale_price)
    return math.floor((regular - sale) / regular * 100 + 0.5)


def store_filters(deals: List[Any]) -> List[str]:
    """'All' suivi des magasins distincts, dans l'ordre d'apparition"""
    stores = [ALL_STORES]
    for deal in deals:
        store = _field(deal, "store")
        if store not in stores:
            stores.append(store)
    return stores


def filter_by_store(deals: List[Any], store: Optional[str]) -> List[Any]:
    if not store or store == ALL_STORES:
        return list(deals)

    return [deal for deal in deals if _field(deal, "store") == store]


def group_by_category(deals: List[Any]) -> Dict[str, List[Any]]:
    """Regroupe par catégorie en conservant l'ordre de première apparition"""
    grouped: Dict[str, List[Any]] = {}
    for deal in deals:
        category = _field(deal, "category") or DEFAULT_CATEGORY
        grouped.setdefault(category, []).append(deal)
    return grouped
