import base64
import io
import logging
from typing import Protocol

import httpx
import qrcode

from app.core.config import Settings, get_settings
from app.core.exceptions import MailDeliveryError
from app.db.models import Visitor

logger = logging.getLogger(__name__)


class VisitorMailer(Protocol):
    def send_visitor_qr_code(self, visitor: Visitor) -> None: ...


def make_qr_png(data: str) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


class VisitorMailService:
    """Emails a visitor their pass as a QR code through an HTTP mail provider."""

    def __init__(self, settings: Settings | None = None, client: httpx.Client | None = None):
        self.settings = settings or get_settings()
        self._client = client

    def pass_url(self, visitor: Visitor) -> str:
        return f"{self.settings.VISITOR_PASS_BASE_URL.rstrip('/')}/{visitor.id}"

    def build_message(self, visitor: Visitor) -> dict:
        lines = [
            f"Hello {visitor.name},",
            "",
            "Your visitor pass is attached. Show the QR code at the entrance.",
            f"Visit date: {visitor.date or '-'}",
        ]
        if visitor.duration:
            lines.append(f"Duration: {visitor.duration} {visitor.durationunit or ''}".rstrip())
        lines.append(f"Approved: {'yes' if visitor.is_approved else 'pending'}")

        png = make_qr_png(self.pass_url(visitor))
        return {
            "from": {"email": self.settings.MAIL_FROM},
            "personalizations": [{"to": [{"email": visitor.email}], "subject": "Your visitor pass"}],
            "content": [{"type": "text/plain", "value": "\n".join(lines)}],
            "attachments": [
                {
                    "content": base64.b64encode(png).decode("ascii"),
                    "type": "image/png",
                    "filename": f"visitor-{visitor.id}.png",
                    "disposition": "attachment",
                }
            ],
        }

    def send_visitor_qr_code(self, visitor: Visitor) -> None:
        if not self.settings.mail_configured:
            raise MailDeliveryError("Mail provider not configured")
        if not visitor.email:
            raise MailDeliveryError(f"Visitor {visitor.id} has no email address")

        headers = {
            "Authorization": f"Bearer {self.settings.MAIL_API_KEY}",
            "Content-Type": "application/json",
        }
        payload = self.build_message(visitor)
        try:
            if self._client is not None:
                resp = self._client.post(self.settings.MAIL_API_URL, json=payload, headers=headers)
            else:
                with httpx.Client(timeout=self.settings.MAIL_TIMEOUT_SECONDS) as client:
                    resp = client.post(self.settings.MAIL_API_URL, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise MailDeliveryError(f"Mail provider unreachable: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            raise MailDeliveryError(f"Mail send failed {resp.status_code}: {resp.text[:200]}")
        logger.info("visitor.mail sent visitor_id=%s to=%s", visitor.id, visitor.email)
