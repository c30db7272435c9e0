import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from app.core.exceptions import NotFoundError
from app.db.models import WRITABLE_FIELDS, Visitor
from app.services.visitor_mail_service import VisitorMailer
from app.services.visitor_normalizer import ALWAYS_KEPT_FIELDS, normalize_visitor_input
from app.services.visitor_status import VisitorStatus, parse_status_token
from app.services.visitor_storage import VisitorStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationOutcome:
    sent: bool
    error: str | None = None


def notify_visitor(mailer: VisitorMailer, visitor: Visitor) -> NotificationOutcome:
    """Best-effort QR email after a write; failures are captured, never raised."""
    try:
        mailer.send_visitor_qr_code(visitor)
    except Exception as exc:
        logger.warning("visitor.notify failed visitor_id=%s error=%s", visitor.id, exc)
        return NotificationOutcome(sent=False, error=str(exc))
    return NotificationOutcome(sent=True)


def _require_visitor(storage: VisitorStorage, visitor_id: int) -> Visitor:
    visitor = storage.find_by_id(visitor_id)
    if not visitor:
        raise NotFoundError(f"Visitor with id {visitor_id} not found")
    return visitor


def create_visitor(storage: VisitorStorage, mailer: VisitorMailer, data: Mapping[str, Any]) -> Visitor:
    logger.debug("visitor.create received %s", dict(data))
    cleaned = normalize_visitor_input(data)
    logger.debug("visitor.create cleaned %s", cleaned)

    visitor = storage.save(storage.create(cleaned))
    notify_visitor(mailer, visitor)
    return visitor


def list_visitors(storage: VisitorStorage) -> list[Visitor]:
    return list(storage.find_all())


def get_visitor(storage: VisitorStorage, visitor_id: int) -> Visitor:
    return _require_visitor(storage, visitor_id)


def update_visitor(
    storage: VisitorStorage,
    mailer: VisitorMailer,
    visitor_id: int,
    data: Mapping[str, Any],
) -> Visitor:
    visitor = _require_visitor(storage, visitor_id)

    current = {key: getattr(visitor, key) for key in ALWAYS_KEPT_FIELDS}
    cleaned = normalize_visitor_input(data, defaults=current)
    logger.debug("visitor.update cleaned id=%s %s", visitor_id, cleaned)

    for key, value in cleaned.items():
        if key in WRITABLE_FIELDS:
            setattr(visitor, key, value)
    saved = storage.save(visitor)

    outcome = notify_visitor(mailer, saved)
    if outcome.sent:
        logger.info("visitor.update QR email re-sent visitor_id=%s", saved.id)
    return saved


def delete_visitor(storage: VisitorStorage, visitor_id: int) -> dict:
    if storage.delete_by_id(visitor_id) == 0:
        raise NotFoundError(f"Visitor with id {visitor_id} not found")
    return {"message": f"Visitor with id {visitor_id} deleted successfully"}


def get_visitor_by_national_id(storage: VisitorStorage, nationalid: str) -> Visitor:
    visitor = storage.find_by_national_id(nationalid)
    if not visitor:
        raise NotFoundError(f"Visitor with national ID {nationalid} not found")
    return visitor


def update_visitor_status(storage: VisitorStorage, visitor_id: int, status: str) -> Visitor:
    visitor = _require_visitor(storage, visitor_id)
    token = parse_status_token(status)

    logger.info("visitor.status id=%s -> %s", visitor_id, token.value)
    VisitorStatus.of(visitor).apply(token).write_to(visitor)
    return storage.save(visitor)
