import json
from collections.abc import Callable
from datetime import datetime

import httpx
import pytest

from app.services.backend_client import BackendClient

BACKEND_URL = "http://backend.test"

PROVIDERS = [
    {
        "_id": "doc1",
        "name": "Ana Ruiz",
        "email": "ana@example.com",
        "speciality": "Wildlife Photography",
        "degree": "BFA",
        "experience": "4 Year",
        "fees": 50,
        "about": "Birds, mostly.",
        "address": {"line1": "1 Main St", "line2": "Springfield"},
        "image": "https://img.example.com/ana.png",
        "available": True,
        "available_slots": ["10:00 AM", "2:00 PM", "2:31 PM", "5:00 PM"],
    },
    {
        "_id": "doc2",
        "name": "Ben Ode",
        "speciality": "Wildlife Photography",
        "experience": "2 Year",
        "fees": 40,
        "available_slots": ["9:00 AM"],
    },
    {
        "_id": "doc3",
        "name": "Cy Tam",
        "speciality": "Event Photography",
        "experience": "10 Year",
        "fees": 75.5,
        "available_slots": [],
    },
]


class FakeBackend:
    """Stands in for the booking backend and records every request it sees."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.providers = [dict(p) for p in PROVIDERS]
        self.booking_reply: dict = {"success": True, "message": "Appointment Booked"}
        self.add_provider_reply: dict = {"success": True, "message": "Photographer Added"}
        self.fail_with: Exception | None = None
        self.on_booking: Callable[[], None] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        if request.url.path == "/api/doctor/list":
            return httpx.Response(200, json={"success": True, "doctors": self.providers})
        if request.url.path == "/api/user/book-appointment":
            if self.on_booking is not None:
                self.on_booking()
            return httpx.Response(200, json=self.booking_reply)
        if request.url.path == "/api/admin/add-doctor":
            return httpx.Response(200, json=self.add_provider_reply)
        return httpx.Response(404, json={"success": False, "message": "Not Found"})

    def calls_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def booking_calls(self) -> list[httpx.Request]:
        return self.calls_to("/api/user/book-appointment")

    @staticmethod
    def json_body(request: httpx.Request) -> dict:
        return json.loads(request.content)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(backend: FakeBackend) -> BackendClient:
    return BackendClient(base_url=BACKEND_URL, transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 3, 5, 14, 30)


@pytest.fixture
def clock(now: datetime) -> Callable[[], datetime]:
    return lambda: now
