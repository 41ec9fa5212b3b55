"""Outbound email through the SendGrid v3 REST API."""

import logging

import httpx

from app.core import config
from app.core.errors import UpstreamError

logger = logging.getLogger(__name__)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"
SENDGRID_TIMEOUT_SECONDS = 15.0


async def send_email(to_email: str, subject: str, text: str, html: str) -> bool:
    """
    Send a single message. No retries: a provider failure is surfaced to the caller.

    Returns:
        True when the provider accepted the message, False when sending is
        disabled (no SENDGRID_API_KEY configured).

    Raises:
        UpstreamError: the provider rejected the request or was unreachable.
    """
    if not config.SENDGRID_API_KEY:
        logger.warning("SENDGRID_API_KEY not set; skipping email '%s' to %s", subject, to_email)
        return False

    payload = {
        "personalizations": [{"to": [{"email": to_email}]}],
        "from": {"email": config.FROM_EMAIL},
        "subject": subject,
        "content": [
            {"type": "text/plain", "value": text},
            {"type": "text/html", "value": html},
        ],
    }
    headers = {
        "Authorization": f"Bearer {config.SENDGRID_API_KEY}",
        "Content-Type": "application/json",
    }

    try:
        async with httpx.AsyncClient(timeout=SENDGRID_TIMEOUT_SECONDS) as client:
            response = await client.post(SENDGRID_SEND_URL, json=payload, headers=headers)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("SendGrid rejected email to %s: %s %s", to_email, e.response.status_code, e.response.text)
        raise UpstreamError(f"Email provider error: {e.response.status_code} {e.response.text}")
    except httpx.HTTPError as e:
        logger.error("SendGrid request failed for %s: %s", to_email, e)
        raise UpstreamError(f"Email provider error: {e}")

    logger.info("Email '%s' sent to %s", subject, to_email)
    return True
