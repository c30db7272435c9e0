from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text, inspect
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Visitor(Base):
    __tablename__ = "visitors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nationalid: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    company: Mapped[str | None] = mapped_column(String(120), nullable=True)
    purpose: Mapped[str | None] = mapped_column(Text, nullable=True)
    host_name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    date: Mapped[str | None] = mapped_column(String(10), nullable=True)
    time: Mapped[str | None] = mapped_column(String(10), nullable=True)
    duration: Mapped[str | None] = mapped_column(String(20), nullable=True)
    durationunit: Mapped[str | None] = mapped_column(String(20), nullable=True)
    is_approved: Mapped[bool] = mapped_column("isApproved", Boolean, nullable=False, default=False)
    inprogress: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    exit: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# Attributes a caller may write; identity and audit columns are managed here.
WRITABLE_FIELDS = frozenset(attr.key for attr in inspect(Visitor).column_attrs) - {"id", "created_at", "updated_at"}
