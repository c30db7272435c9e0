import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.logging import setup_logging
from app.db.base import Base
from app.db.models import Visitor
from app.db.session import SessionLocal, engine

settings = get_settings()
logger = logging.getLogger(__name__)


def _seed_dev_data(db: Session) -> None:
    if db.query(Visitor).count() > 0:
        return

    visitor = Visitor(
        nationalid="DEMO-0001",
        name="Demo Visitor",
        email="visitor@visitors.local",
        company="Demo Co",
        purpose="Site tour",
        host_name="Front Desk",
        duration="2",
        durationunit="hours",
    )
    try:
        db.add(visitor)
        db.commit()
    except IntegrityError:
        # Another worker/process already inserted seed rows.
        db.rollback()


def startup() -> None:
    setup_logging(logging.DEBUG if settings.DEBUG else logging.INFO)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if settings.ENVIRONMENT.lower() == "development":
            _seed_dev_data(db)
    finally:
        db.close()
    logger.info("%s started environment=%s", settings.APP_NAME, settings.ENVIRONMENT)
