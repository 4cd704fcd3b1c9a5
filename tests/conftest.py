import pytest
from typing import Any, Dict, Generator, List, Optional
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from checkout_backend.asgi import app as fastapi_app
from checkout_backend.config import EmailSettings
from checkout_backend.emails import views as emails_views

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

class _Resp:
    def __init__(self, data=None):
        self.data = data

def make_settings_client(rows: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
    """
    Faux client Supabase pour table(...).select(...).in_(...).execute().
    - rows: lignes {key, value} renvoyées
    - error: exception levée par execute()
    """
    client = MagicMock()
    table = MagicMock()
    select = MagicMock()
    in_ = MagicMock()
    client.table.return_value = table
    table.select.return_value = select
    select.in_.return_value = in_
    if error is not None:
        in_.execute.side_effect = error
    else:
        in_.execute.return_value = _Resp(data=rows)
    return client

@pytest.fixture
def settings_rows(monkeypatch):
    """Installe une table de réglages factice; retourne le client pour inspection."""
    def _install(rows=None, error=None):
        fake = make_settings_client(rows, error)
        monkeypatch.setattr("checkout_backend.infra.supabase_client.get_service_supabase", lambda: fake)
        return fake
    return _install

@pytest.fixture
def valid_credentials_rows():
    return [
        {"key": "razorpay_key_id", "value": "rzp_test_public"},
        {"key": "razorpay_key_secret", "value": "s3cr3t"},
    ]

@pytest.fixture
def email_settings() -> EmailSettings:
    return EmailSettings(
        api_url="https://mail.example.test/v3/smtp/email",
        api_key="test-api-key",
        sender_email="orders@velora.example",
        sender_name="Velora Tradings",
        site_name="Velora Tradings",
        currency_symbol="₹",
        admin_email="owner@velora.example",
        timeout=5,
    )

@pytest.fixture
def order_data_payload() -> Dict[str, Any]:
    return {
        "orderId": "abcdef1234567890",
        "customerName": "Asha Rao",
        "items": [
            {"name": "Brass Diya", "quantity": 2, "price": 1999.5},
            {"name": "Cotton Runner", "quantity": 1, "price": 450},
        ],
        "totalAmount": 4449,
        "shippingAddress": {
            "firstName": "Asha",
            "lastName": "Rao",
            "address": "12 MG Road",
            "city": "Bengaluru",
            "state": "Karnataka",
            "zipCode": "560001",
            "phone": "+91 98450 00000",
        },
        "paymentMethod": "cod",
        "orderDate": "2025-03-05T10:30:00.000Z",
    }

class FakeDispatcher:
    """Dispatcher factice: enregistre les envois et renvoie un booléen fixé."""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls: List[Dict[str, str]] = []

    def send(self, to: str, subject: str, html: str) -> bool:
        self.calls.append({"to": to, "subject": subject, "html": html})
        return self.result

@pytest.fixture
def dispatcher_factory():
    return FakeDispatcher

@pytest.fixture
def fake_dispatcher(app, email_settings):
    """Remplace la configuration email et le dispatcher dans les dépendances de l'app."""
    dispatcher = FakeDispatcher()
    app.dependency_overrides[emails_views.get_email_settings] = lambda: email_settings
    app.dependency_overrides[emails_views.get_email_dispatcher] = lambda: dispatcher
    try:
        yield dispatcher
    finally:
        app.dependency_overrides.pop(emails_views.get_email_settings, None)
        app.dependency_overrides.pop(emails_views.get_email_dispatcher, None)

# Aucun accès réseau réel à Supabase pendant les tests
@pytest.fixture(autouse=True)
def _no_real_supabase(monkeypatch):
    def _unexpected():
        raise RuntimeError("Supabase non disponible en tests")
    monkeypatch.setattr("checkout_backend.infra.supabase_client.get_service_supabase", _unexpected)
