from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from app.core.config import settings
from app.core.database import get_db
from app.core.dependencies import get_current_profile
from app.models.user_profile import UserProfile
from app.schemas.deal import FeedResponse
from app.services.deal_service import DealService
from app.utils.date_helpers import today_in_timezone

router = APIRouter(prefix="/feed", tags=["Feed"])


@router.get("", response_model=FeedResponse)
def get_feed(
    store: Optional[str] = Query(None, max_length=100),
    profile: UserProfile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Promotions en cours, groupées par catégorie"""
    today = today_in_timezone(settings.FEED_TIMEZONE)
    return DealService(db).build_feed(profile, today, store)
