"""Shared fixtures: in-memory database, storage and mail doubles."""

import pytest
from sqlalchemy.orm import Session

from app.db import models  # noqa: F401  registers tables on Base.metadata
from app.db.base import Base
from app.db.session import build_engine
from app.services.visitor_storage import SqlVisitorStorage


class RecordingMailer:
    """Mail double that records sends, or raises when ``fail`` is set."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[int] = []

    def send_visitor_qr_code(self, visitor) -> None:
        if self.fail:
            raise RuntimeError("mail provider down")
        self.sent.append(visitor.id)


@pytest.fixture
def db_engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def storage(db) -> SqlVisitorStorage:
    return SqlVisitorStorage(db)


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def failing_mailer() -> RecordingMailer:
    return RecordingMailer(fail=True)
