from __future__ import annotations

import logging

from courtbook.core.config import get_settings
from courtbook.db.base import Base
from courtbook.db.session import SessionLocal, engine

# Import models to register with SQLAlchemy
import courtbook.models  # noqa: F401

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO)

    # Tables carry the slot uniqueness constraints bookings rely on
    Base.metadata.create_all(bind=engine)

    from courtbook.models.settings import AppSettings

    db = SessionLocal()
    try:
        if db.get(AppSettings, 1) is None:
            db.add(AppSettings(id=1, max_hours_per_day=get_settings().default_max_hours_per_day))
        db.commit()
    finally:
        db.close()

    logger.info("DB initialized")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
