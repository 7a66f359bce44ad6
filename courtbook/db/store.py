from __future__ import annotations

import logging
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from courtbook.core.errors import TransportError

logger = logging.getLogger(__name__)


@contextmanager
def store_call(db: Session, what: str):
    """Translate store failures (driver errors, pool timeouts) into TransportError.

    IntegrityError passes through untouched so callers can map it to a conflict.
    """
    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Store call failed (%s): %s", what, exc)
        cause = exc.orig if isinstance(exc, DBAPIError) and exc.orig is not None else exc
        raise TransportError(f"{what} failed: {cause}") from exc
