from sqlalchemy.orm import Session
from fastapi import HTTPException
from functools import wraps
import logging

logger = logging.getLogger(__name__)


def transactional(func):
    """
    Décorateur pour les méthodes de service qui écrivent en base
    Commit si la méthode réussit, rollback sinon.
    Usage: @transactional sur une méthode d'un service possédant self.db
    """

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        db: Session = self.db
        try:
            result = func(self, *args, **kwargs)
            db.commit()
            logger.debug(f"Transaction committed in {func.__name__}")
            return result
        except HTTPException as e:
            db.rollback()
            logger.info(
                f"Transaction rolled back in {func.__name__}: {e.status_code} {e.detail}"
            )
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Transaction failed in {func.__name__}: {e}", exc_info=True)
            raise

    return wrapper
