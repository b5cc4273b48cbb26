import json

import httpx
import pytest

from madfood.infra.reminder_client import ReminderClient, send_weekly_reminder
from madfood.logic.reminders.preview import ReminderPreview
from madfood.utilities.errors import ReminderDispatchError

URL = "https://reminders.test/send-weekly-reminder"


def _client(handler, token=""):
    return ReminderClient(url=URL, token=token, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_send_posts_phone_and_message():
    captured = {}

    def handler(request):
        captured["body"] = json.loads(request.content)
        captured["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json={"sid": "SM1", "status": "queued", "message": "Reminder sent"})

    result = await _client(handler, token="secret").send(" +15551234567 ", "  Hi Sam  ")
    assert captured["body"] == {"phoneNumber": "+15551234567", "message": "Hi Sam"}
    assert captured["auth"] == "Bearer secret"
    assert result == {"message": "Reminder sent", "sid": "SM1", "status": "queued"}


@pytest.mark.asyncio
async def test_send_weekly_reminder_uses_preview():
    captured = {}

    def handler(request):
        captured["body"] = json.loads(request.content)
        captured["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json={})

    preview = ReminderPreview("+1555", "Upcoming meals:")
    result = await send_weekly_reminder(_client(handler), preview)
    assert captured["body"] == {"phoneNumber": "+1555", "message": "Upcoming meals:"}
    assert captured["auth"] is None
    # the sent text is echoed back when the function does not return one
    assert result["message"] == "Upcoming meals:"


@pytest.mark.asyncio
async def test_error_status_raises():
    def handler(request):
        return httpx.Response(400, json={"error": "Invalid phone number"})

    with pytest.raises(ReminderDispatchError, match="Invalid phone number"):
        await _client(handler).send("+1", "hello")


@pytest.mark.asyncio
async def test_non_json_error_body():
    def handler(request):
        return httpx.Response(503, text="Service Unavailable")

    with pytest.raises(ReminderDispatchError, match="503"):
        await _client(handler).send("+1", "hello")


@pytest.mark.asyncio
async def test_unreachable_function():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ReminderDispatchError, match="unreachable"):
        await _client(handler).send("+1", "hello")


@pytest.mark.asyncio
async def test_missing_url():
    with pytest.raises(ReminderDispatchError, match="not configured"):
        await ReminderClient(url="").send("+1", "hello")


@pytest.mark.asyncio
async def test_success_with_non_object_body():
    def handler(request):
        return httpx.Response(200, json=["queued"])

    result = await _client(handler).send("+1", "hello")
    assert result == {"message": "hello", "sid": None, "status": None}
