from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.core.config import settings
from app.core.database import engine, Base, SessionLocal
from app.middleware.error_handler import (
    global_exception_handler,
    onboarding_required_handler,
)
from app.middleware.logging import configure_logging
from app.services.user_service import UserService
from app.utils.exceptions import OnboardingRequiredError

from app import models  # noqa: F401  (enregistre les tables sur Base.metadata)
from app.api.v1 import api_router

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Démarrage de l'application...")

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        UserService(db).purge_expired_revocations()
    finally:
        db.close()

    yield

    logger.info("Arrêt de l'application...")


app = FastAPI(title=settings.APP_NAME, version=settings.VERSION, lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


app.include_router(api_router, prefix="/api/v1")


app.add_exception_handler(OnboardingRequiredError, onboarding_required_handler)
app.add_exception_handler(SQLAlchemyError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)


@app.get("/")
async def root():
    return {"message": settings.APP_NAME, "version": settings.VERSION, "docs": "/docs"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
