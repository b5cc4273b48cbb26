"""Client for the hosted reminder function that relays text messages.

Request:  POST {"phoneNumber": str, "message": str}
Response: {"sid": str, "status": str, "message": str} or {"error": str}
"""
import logging
from typing import Any, Dict, Optional

import httpx

from madfood.utilities.config import REMINDER_FUNCTION_TOKEN, REMINDER_FUNCTION_URL, REMINDER_TIMEOUT
from madfood.logic.reminders.preview import ReminderPreview
from madfood.utilities.errors import ReminderDispatchError

logger = logging.getLogger(__name__)


class ReminderClient:
    def __init__(self, url: str = REMINDER_FUNCTION_URL, token: str = REMINDER_FUNCTION_TOKEN,
                 timeout: float = REMINDER_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.token = token
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def send(self, phone_number: str, message: str) -> Dict[str, Any]:
        if not self.url:
            raise ReminderDispatchError("Reminder function URL is not configured")
        payload = {"phoneNumber": phone_number.strip(), "message": message.strip()}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=payload, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error("Reminder function unreachable: %s", e)
            raise ReminderDispatchError(f"Reminder function unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        if response.status_code != 200:
            error = data.get("error")
            logger.error("Reminder function returned %s: %s", response.status_code, error or response.text)
            raise ReminderDispatchError(error or f"Reminder function returned {response.status_code}")
        logger.info("Reminder sent to %s", payload["phoneNumber"])
        return {"message": data.get("message") or message, "sid": data.get("sid"), "status": data.get("status")}


async def send_weekly_reminder(client: ReminderClient, preview: ReminderPreview) -> Dict[str, Any]:
    """Dispatch a built preview; the phone number and text come from the preview as-is."""
    return await client.send(preview.phone_number, preview.message)
