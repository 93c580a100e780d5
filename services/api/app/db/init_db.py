from __future__ import annotations

import os

import structlog

from services.api.app.db.database import get_engine
from services.api.app.db.models import Base

logger = structlog.get_logger(__name__)

_TRUTHY = {"1", "true", "yes", "y"}


def init_db() -> None:
    """Create the activity tables unless FORMVOICE_DB_AUTO_CREATE is off."""
    if os.getenv("FORMVOICE_DB_AUTO_CREATE", "true").strip().lower() not in _TRUTHY:
        return

    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.debug("db_initialized", url=engine.url.render_as_string(hide_password=True))
