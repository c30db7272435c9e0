from app.db.models.visitor import WRITABLE_FIELDS, Visitor

__all__ = [
    "Visitor",
    "WRITABLE_FIELDS",
]
