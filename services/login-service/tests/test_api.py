from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from conftest import FakeCredentialStore, FakeSecretHasher, make_account
from login_gate.api import routes
from login_gate.domain.gate import AuthenticationGate
from login_gate.security.rate_limiter import SlidingWindowRateLimiter


@pytest.fixture
def api_client(monkeypatch):
    """Provide a FastAPI test client with an in-memory store and no rate limit."""
    store = FakeCredentialStore(
        make_account(),
        make_account("unverified@gmail.com", is_verified=False),
        make_account("pending@gmail.com", is_approved=False),
    )
    app = FastAPI()
    app.include_router(routes.router)
    app.state.login_gate = AuthenticationGate(store, FakeSecretHasher())
    monkeypatch.setattr(routes, "rate_limiter", None)

    with TestClient(app) as client:
        yield client, store


def _login(client, email, password):
    return client.post("/v1/auth/login", json={"email": email, "password": password})


def test_login_success_returns_public_user(api_client):
    client, _ = api_client

    response = _login(client, "contact.singhastra@gmail.com", "CorrectPass1!")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "user": {
            "id": "acc-1",
            "email": "contact.singhastra@gmail.com",
            "role": "institution_admin",
            "name": "Astra Singh",
            "image": "https://cdn.example.com/avatars/acc-1.png",
        },
    }


def test_unknown_and_wrong_password_responses_are_identical(api_client):
    client, _ = api_client

    unknown = _login(client, "ghost@gmail.com", "CorrectPass1!")
    wrong = _login(client, "contact.singhastra@gmail.com", "WrongPass1!")

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"success": False, "message": "Invalid Credentials"}


def test_unverified_email_response_carries_email_and_remediation(api_client):
    client, _ = api_client

    response = _login(client, "unverified@gmail.com", "CorrectPass1!")

    assert response.status_code == 403
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "EMAIL_NOT_VERIFIED"
    assert body["email"] == "unverified@gmail.com"
    assert body["remediation"] == "RESEND_VERIFICATION"
    assert "user" not in body


def test_pending_approval_response_points_to_status_page(api_client):
    client, _ = api_client

    response = _login(client, "pending@gmail.com", "CorrectPass1!")

    assert response.status_code == 403
    body = response.json()
    assert body["code"] == "APPROVAL_PENDING"
    assert body["remediation"] == "VIEW_APPROVAL_STATUS"
    assert body["redirect_url"] == routes.settings.approval_status_url
    assert "email" not in body


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"email": "not-an-email", "password": "x"},
        {"email": "contact.singhastra@gmail.com", "password": ""},
        {"email": None, "password": None},
        {"email": 42, "password": "x"},
        {"email": "contact.singhastra@gmail.com", "password": 12345},
        {"email": ["contact.singhastra@gmail.com"], "password": {"value": "x"}},
        ["not", "an", "object"],
        "contact.singhastra@gmail.com",
    ],
)
def test_malformed_body_is_invalid_input(api_client, payload):
    client, store = api_client

    response = client.post("/v1/auth/login", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "code" not in body
    assert store.lookups == []


@pytest.mark.parametrize(
    "content",
    [b"not json", b"", b"\xff\xfe", b"{\"email\": "],
)
def test_unparseable_body_is_invalid_input(api_client, content):
    client, store = api_client

    response = client.post(
        "/v1/auth/login", content=content, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid email or password format"}
    assert store.lookups == []


def test_missing_body_is_invalid_input(api_client):
    client, store = api_client

    response = client.post("/v1/auth/login")

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert store.lookups == []


def test_store_outage_is_generic_internal_error(api_client):
    client, store = api_client
    store.error = TimeoutError("pool exhausted")

    response = _login(client, "contact.singhastra@gmail.com", "CorrectPass1!")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "An unexpected error occurred",
        "code": "INTERNAL_ERROR",
    }


def test_login_respects_rate_limits(api_client, monkeypatch):
    client, _ = api_client
    monkeypatch.setattr(
        routes, "rate_limiter", SlidingWindowRateLimiter(max_requests=2, window_seconds=60)
    )

    first = _login(client, "contact.singhastra@gmail.com", "WrongPass1!")
    second = _login(client, "contact.singhastra@gmail.com", "WrongPass1!")
    third = _login(client, "contact.singhastra@gmail.com", "CorrectPass1!")

    assert first.status_code == 401
    assert second.status_code == 401
    assert third.status_code == 429
    assert third.json()["detail"] == "rate limited"


def test_login_outcomes_are_counted(api_client):
    client, _ = api_client
    labels = {"outcome": "granted"}
    before = REGISTRY.get_sample_value("login_attempts_total", labels) or 0.0

    _login(client, "contact.singhastra@gmail.com", "CorrectPass1!")

    assert REGISTRY.get_sample_value("login_attempts_total", labels) == before + 1
