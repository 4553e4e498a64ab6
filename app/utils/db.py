from contextlib import contextmanager
import logging
from models import db
from app.services.errors import DomainError

logger = logging.getLogger(__name__)


@contextmanager
def transactional(message="DB transaction failed"):
    """Commit the session when the block succeeds, roll back and re-raise otherwise.

    Domain errors are rolled back quietly; anything else is logged with its
    traceback before being re-raised.
    """
    try:
        yield db.session
        db.session.commit()
    except DomainError:
        db.session.rollback()
        raise
    except Exception as e:
        logger.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise
