"""
Global pytest configuration and fixtures.
"""
import json
from typing import Any, Dict
from unittest.mock import Mock

import pytest

from tradiestop.config import TradieStopConfig, reload_config, reset_logging
from tradiestop.models import AppData, Session


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        "API_BASE_URL": "http://api.test/api",
        "REQUEST_TIMEOUT": "5",
        "NOTIFICATION_POLL_INTERVAL": "15",
        "DEFAULT_TAX_RATE": "10",
        "INVOICE_DUE_DAYS": "15",
        "CURRENCY_SYMBOL": "$",
        "ENVIRONMENT": "testing",
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
        "MAX_RETRIES": "2",
        "RETRY_DELAY": "0",
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch, tmp_path):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("SESSION_FILE", str(tmp_path / "session.json"))

    # Clear the global config to force reload with test values
    import tradiestop.config.settings
    tradiestop.config.settings._config = None

    yield test_env_vars

    tradiestop.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> TradieStopConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def mock_http_session():
    """Mock requests session; tests set ``.request.return_value``."""
    return Mock()


def make_response(status_code: int = 200, payload: Any = None, text: str = None) -> Mock:
    """Mock of a requests.Response carrying a JSON payload."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if text is None:
        text = "" if payload is None else json.dumps(payload)
    response.text = text
    response.content = text.encode()

    def _json():
        return json.loads(text)

    response.json.side_effect = _json
    return response


@pytest.fixture
def response_factory():
    """Factory building mock HTTP responses."""
    return make_response


@pytest.fixture
def client_payload() -> Dict[str, Any]:
    return {
        "id": "client-1",
        "role": "Client",
        "name": "Alice Walker",
        "imageUrl": "https://img.test/alice.png",
        "joinedDate": "January 10, 2024",
    }


@pytest.fixture
def tradie_payload() -> Dict[str, Any]:
    return {
        "id": "tradie-1",
        "role": "Tradie",
        "name": "Bob Builder",
        "imageUrl": "https://img.test/bob.png",
        "joinedDate": "February 3, 2024",
    }


@pytest.fixture
def admin_payload() -> Dict[str, Any]:
    return {
        "id": "admin-1",
        "role": "Admin",
        "name": "Ada Admin",
        "joinedDate": "December 1, 2023",
    }


@pytest.fixture
def invoice_payload() -> Dict[str, Any]:
    """An invoice as the API returns it (paid, 2 line items, 10% tax)."""
    return {
        "id": "inv-1",
        "bookingId": "booking-3",
        "tradie": {
            "id": "tradie-1",
            "name": "Bob Builder",
            "profession": "Plumber",
            "companyDetails": {
                "name": "Bob's Plumbing",
                "address": "12 Pipe St, Sydney",
                "phone": "0400 000 000",
                "email": "bob@plumbing.test",
                "taxId": "ABN 11 222 333 444",
                "logoUrl": "",
            },
        },
        "client": {"id": "client-1", "name": "Alice Walker", "address": "1 Main St"},
        "invoiceNumber": "INV-600123",
        "issueDate": "May 20, 2024",
        "dueDate": "June 4, 2024",
        "items": [
            {"id": "i1", "description": "Labour", "quantity": 2, "unitPrice": 85},
            {"id": "i2", "description": "Parts", "quantity": 1, "unitPrice": 42.5},
        ],
        "notes": "Thank you for your business!",
        "subtotal": 212.5,
        "tax": 21.25,
        "total": 233.75,
        "status": "Paid",
        "taxRate": 10,
        "themeColor": "#334155",
        "footerNotes": "Payment is due within 15 days.",
    }


@pytest.fixture
def app_data_payload(client_payload, tradie_payload, admin_payload, invoice_payload) -> Dict[str, Any]:
    """A ``GET /data/all`` response covering every record type."""
    return {
        "users": [client_payload, tradie_payload, admin_payload],
        "tradies": [
            {
                "id": "tradie-1",
                "name": "Bob Builder",
                "profession": "Plumber",
                "rating": 4.5,
                "reviewsCount": 2,
                "availability": "Weekdays",
                "companyDetails": invoice_payload["tradie"]["companyDetails"],
            },
            {
                "id": "tradie-2",
                "name": "Eve Sparks",
                "profession": "Electrician",
                "rating": 5,
                "reviewsCount": 1,
            },
        ],
        "bookings": [
            {
                "id": "booking-1",
                "clientId": "client-1",
                "clientName": "Alice Walker",
                "tradieId": "tradie-1",
                "tradieName": "Bob Builder",
                "tradieProfession": "Plumber",
                "serviceDate": "June 15, 2024, 09:00",
                "status": "Requested",
                "details": "Leaking tap",
            },
            {
                "id": "booking-2",
                "clientId": "client-1",
                "clientName": "Alice Walker",
                "tradieId": "tradie-1",
                "tradieName": "Bob Builder",
                "tradieProfession": "Plumber",
                "serviceDate": "June 20, 2024, 13:30",
                "status": "Confirmed",
                "details": "Install dishwasher",
            },
            {
                "id": "booking-3",
                "clientId": "client-1",
                "clientName": "Alice Walker",
                "tradieId": "tradie-1",
                "tradieName": "Bob Builder",
                "tradieProfession": "Plumber",
                "serviceDate": "May 18, 2024, 10:00",
                "status": "Completed",
                "details": "Blocked drain",
            },
            {
                "id": "booking-4",
                "clientId": "client-1",
                "clientName": "Alice Walker",
                "tradieId": "tradie-2",
                "tradieName": "Eve Sparks",
                "tradieProfession": "Electrician",
                "serviceDate": "April 2, 2024, 08:00",
                "status": "Completed",
                "details": "Replace switchboard",
            },
            {
                "id": "booking-5",
                "clientId": "client-1",
                "clientName": "Alice Walker",
                "tradieId": "tradie-2",
                "tradieName": "Eve Sparks",
                "tradieProfession": "Electrician",
                "serviceDate": "March 9, 2024, 08:00",
                "status": "Cancelled",
                "details": "Outdoor lights",
            },
        ],
        "messages": [
            {"id": "m1", "senderName": "Bob Builder", "snippet": "See you Monday", "timestamp": "2h ago"}
        ],
        "invoices": [invoice_payload],
        "reviews": [
            {
                "id": "r1",
                "bookingId": "booking-4",
                "reviewerId": "client-1",
                "reviewerName": "Alice Walker",
                "tradieId": "tradie-2",
                "tradieName": "Eve Sparks",
                "rating": 5,
                "comment": "Great work",
                "date": "April 3, 2024",
            }
        ],
        "clientReviews": [],
        "supportTickets": [
            {
                "id": "ticket-1",
                "userId": "client-1",
                "userName": "Alice Walker",
                "userRole": "Client",
                "subject": "Cannot upload photo",
                "description": "The upload button does nothing",
                "status": "Open",
                "date": "May 1, 2024",
            },
            {
                "id": "ticket-2",
                "userId": "tradie-1",
                "userName": "Bob Builder",
                "userRole": "Tradie",
                "subject": "Invoice question",
                "status": "Closed",
                "date": "April 12, 2024",
            },
        ],
    }


@pytest.fixture
def app_data(app_data_payload) -> AppData:
    return AppData.model_validate(app_data_payload)


@pytest.fixture
def client_session(client_payload) -> Session:
    return Session.model_validate({**client_payload, "token": "client-token"})


@pytest.fixture
def tradie_session(tradie_payload) -> Session:
    return Session.model_validate({**tradie_payload, "token": "tradie-token"})


@pytest.fixture
def admin_session(admin_payload) -> Session:
    return Session.model_validate({**admin_payload, "token": "admin-token"})


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging configured by tests (e.g. CLI invocations)."""
    yield
    reset_logging()


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "api: mark test as exercising the HTTP layer")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "services" in str(item.fspath) or "api" in item.name.lower():
            item.add_marker(pytest.mark.api)
