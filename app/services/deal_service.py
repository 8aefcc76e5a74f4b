from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional, Dict, Any
import logging

from app.middleware.transaction_handler import transactional
from app.models.deal import Deal
from app.models.user_profile import UserProfile
from app.schemas.deal import DealCreate, DealResponse
from app.utils.choices import ALL_STORES
from app.utils.deal_helpers import (
    get_discount,
    store_filters,
    filter_by_store,
    group_by_category,
)

logger = logging.getLogger(__name__)


class DealService:
    """Service des promotions: saisie admin et fil d'actualité"""

    def __init__(self, db: Session):
        self.db = db

    def list_active(self, today: date) -> List[Deal]:
        """Promotions dont la fenêtre [valid_from, valid_to] contient today"""
        return (
            self.db.query(Deal)
            .filter(Deal.valid_from <= today, Deal.valid_to >= today)
            .order_by(Deal.category, Deal.id)
            .all()
        )

    @transactional
    def create_deal(self, data: DealCreate) -> Deal:
        deal = Deal(**data.dict())
        self.db.add(deal)
        self.db.flush()

        logger.info(
            f"Deal created: {deal.id} - {deal.store} / {deal.product_name} "
            f"({deal.valid_from} -> {deal.valid_to})"
        )
        return deal

    @staticmethod
    def to_response(deal: Deal) -> DealResponse:
        response = DealResponse.model_validate(deal)
        response.discount_percent = get_discount(deal.sale_price, deal.regular_price)
        return response

    def build_feed(
        self, profile: UserProfile, today: date, store: Optional[str] = None
    ) -> Dict[str, Any]:
        deals = self.list_active(today)
        active_store = store or ALL_STORES

        grouped = group_by_category(filter_by_store(deals, active_store))

        return {
            "profile_name": profile.name,
            "today": today,
            "total": len(deals),
            "stores": store_filters(deals),
            "active_store": active_store,
            "groups": [
                {
                    "category": category,
                    "deals": [self.to_response(deal) for deal in category_deals],
                }
                for category, category_deals in grouped.items()
            ],
        }
