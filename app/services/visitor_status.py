from dataclasses import dataclass, replace
from enum import Enum

from app.core.exceptions import InvalidArgumentError
from app.db.models import Visitor


class StatusToken(str, Enum):
    approve = "approve"
    disapprove = "disapprove"
    inprogress = "inprogress"
    complete = "complete"
    exit = "exit"


# Flags are independent; only disapprove ever clears one.
TRANSITIONS: dict[StatusToken, dict[str, bool]] = {
    StatusToken.approve: {"is_approved": True, "inprogress": True},
    StatusToken.disapprove: {"is_approved": False},
    StatusToken.inprogress: {"inprogress": True},
    StatusToken.complete: {"complete": True},
    StatusToken.exit: {"exit": True},
}


@dataclass(frozen=True)
class VisitorStatus:
    is_approved: bool = False
    inprogress: bool = False
    complete: bool = False
    exit: bool = False

    @classmethod
    def of(cls, visitor: Visitor) -> "VisitorStatus":
        return cls(
            is_approved=bool(visitor.is_approved),
            inprogress=bool(visitor.inprogress),
            complete=bool(visitor.complete),
            exit=bool(visitor.exit),
        )

    def apply(self, token: StatusToken) -> "VisitorStatus":
        return replace(self, **TRANSITIONS[token])

    def write_to(self, visitor: Visitor) -> None:
        visitor.is_approved = self.is_approved
        visitor.inprogress = self.inprogress
        visitor.complete = self.complete
        visitor.exit = self.exit


def parse_status_token(status: str) -> StatusToken:
    try:
        return StatusToken((status or "").lower())
    except ValueError:
        raise InvalidArgumentError(f"Invalid status: {status}") from None
