import logging
from logging.config import dictConfig
from pydantic import BaseModel
from typing import Dict

from app.core.config import settings

LOG_FORMAT = "%(levelprefix)s | %(asctime)s | %(name)s | %(funcName)s | %(lineno)d | %(message)s"


class LogConfig(BaseModel):
    """Configuration de journalisation pour l'application"""

    LOG_LEVEL: str = "INFO"

    version: int = 1
    disable_existing_loggers: bool = False
    formatters: Dict = {
        "default": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": LOG_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
    handlers: Dict = {}
    loggers: Dict = {}

    def __init__(self, **data):
        super().__init__(**data)
        self.handlers = {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "level": self.LOG_LEVEL,
            },
        }
        self.loggers = {
            "app": {"handlers": ["default"], "level": self.LOG_LEVEL, "propagate": False},
            "uvicorn": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "uvicorn.error": {"level": "INFO", "propagate": False},
            "uvicorn.access": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        }


def configure_logging(level: str = None):
    """Applique la configuration de journalisation"""
    config = LogConfig(LOG_LEVEL=(level or settings.LOG_LEVEL).upper())
    dictConfig(config.dict(exclude={"LOG_LEVEL"}))
