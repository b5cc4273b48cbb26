from datetime import datetime, timezone
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from madfood.api.api_run import create_app
from madfood.api.dependencies import get_now
from madfood.infra.reminder_client import ReminderClient

# Wednesday in the week of Sunday 2024-02-04 .. Saturday 2024-02-10
FIXED_NOW = datetime(2024, 2, 7, 12, 0, tzinfo=timezone.utc)
REMINDER_URL = "https://reminders.test/send-weekly-reminder"


class ReminderRecorder:
    """Stands in for the hosted reminder function behind an httpx.MockTransport."""

    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else {"sid": "SM123", "status": "queued", "message": "sent"}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append({
            "url": str(request.url),
            "headers": dict(request.headers),
            "json": json.loads(request.content),
        })
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def reminder_recorder():
    return ReminderRecorder()


@pytest.fixture
def app(tmp_path, reminder_recorder):
    client = ReminderClient(url=REMINDER_URL, token="test-token",
                            transport=httpx.MockTransport(reminder_recorder))
    application = create_app(data_dir=tmp_path, reminder_client=client)
    application.dependency_overrides[get_now] = lambda: FIXED_NOW
    return application


@pytest.fixture
def client(app):
    return TestClient(app)
