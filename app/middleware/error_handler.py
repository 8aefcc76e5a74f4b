from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
import logging

from app.utils.exceptions import OnboardingRequiredError

logger = logging.getLogger(__name__)


async def onboarding_required_handler(request: Request, exc: OnboardingRequiredError):
    """Utilisateur connecté sans profil: renvoyé vers le questionnaire"""
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "error": "onboarding_required",
            "detail": "Complete onboarding before opening the feed",
            "redirect_to": "/",
        },
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Gestionnaire global d'erreurs"""

    if isinstance(exc, IntegrityError):
        logger.error(f"Database Integrity Error: {exc.orig}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={
                "detail": "Database integrity error: A resource with these attributes already exists or is linked improperly."
            },
        )

    if isinstance(exc, (OperationalError, SQLAlchemyError)):
        logger.critical(f"Critical Database Error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "A critical database operation failed."},
        )

    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred on the server."},
    )
