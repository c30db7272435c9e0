from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models import WRITABLE_FIELDS, Visitor


class VisitorStorage(Protocol):
    def find_by_id(self, visitor_id: int) -> Visitor | None: ...

    def find_by_national_id(self, nationalid: str) -> Visitor | None: ...

    def find_all(self) -> list[Visitor]: ...

    def create(self, fields: Mapping[str, Any]) -> Visitor: ...

    def save(self, visitor: Visitor) -> Visitor:
        self.db.add(visitor)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(visitor)
        return visitor

    def delete_by_id(self, visitor_id: int) -> int: ...


class SqlVisitorStorage:
    """SQLAlchemy-backed visitor storage bound to one session."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, visitor_id: int) -> Visitor | None:
        return self.db.query(Visitor).filter(Visitor.id == visitor_id).first()

    def find_by_national_id(self, nationalid: str) -> Visitor | None:
        return self.db.query(Visitor).filter(Visitor.nationalid == nationalid).first()

    def find_all(self) -> list[Visitor]:
        return self.db.query(Visitor).order_by(Visitor.id.asc()).all()

    def create(self, fields: Mapping[str, Any]) -> Visitor:
        return Visitor(**{key: value for key, value in fields.items() if key in WRITABLE_FIELDS})

    def save(self, visitor: Visitor) -> Visitor:
        self.db.add(visitor)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(visitor)
        return visitor

    def delete_by_id(self, visitor_id: int) -> int:
        affected = self.db.query(Visitor).filter(Visitor.id == visitor_id).delete(synchronize_session=False)
        self.db.commit()
        return affected
