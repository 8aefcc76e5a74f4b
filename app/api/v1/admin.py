from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from app.core.config import settings
from app.core.database import get_db
from app.core.dependencies import require_admin
from app.core.security import check_admin_password, create_admin_token
from app.schemas.admin import (
    AdminLoginRequest,
    AdminTokenResponse,
    AdminDealSaveResponse,
    AdminOptionsResponse,
)
from app.schemas.deal import DealCreate
from app.services.deal_service import DealService
from app.utils.admin_form import reset_after_save
from app.utils.choices import STORES, CATEGORIES
from app.utils.exceptions import AdminGateClosedException, AdminNotConfiguredException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/session", response_model=AdminTokenResponse)
def open_admin_session(request: AdminLoginRequest):
    """Vérifie le mot de passe admin côté serveur"""
    if not settings.ADMIN_PASSWORD:
        raise AdminNotConfiguredException()

    if not check_admin_password(request.password):
        logger.warning("Rejected admin password attempt")
        raise AdminGateClosedException()

    logger.info("Admin session opened")
    return {"admin_token": create_admin_token()}


@router.get("/options", response_model=AdminOptionsResponse)
def get_admin_options(admin: dict = Depends(require_admin)):
    return {"stores": STORES, "categories": CATEGORIES}


@router.post(
    "/deals",
    response_model=AdminDealSaveResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_deal(
    request: DealCreate,
    admin: dict = Depends(require_admin),
    db: Session = Depends(get_db),
):
    service = DealService(db)
    deal = service.create_deal(request)

    return {
        "saved": True,
        "deal": service.to_response(deal),
        "form": reset_after_save(request),
    }
