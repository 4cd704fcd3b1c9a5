import functools
import json
import httpx
import pytest
from fastapi.testclient import TestClient

from checkout_backend.payments import razorpay_client

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"


def _assert_cors(res, methods=ALLOWED_METHODS):
    assert res.headers["access-control-allow-origin"] == "*"
    assert res.headers["access-control-allow-methods"] == methods
    assert res.headers["access-control-allow-headers"] == "Content-Type, Authorization, X-Client-Info, Apikey"


@pytest.fixture
def razorpay(monkeypatch):
    """
    Passerelle Razorpay simulée via httpx.MockTransport: le vrai client HTTP
    est exécuté, seule la couche transport est remplacée.
    """
    state = {"requests": [], "response": httpx.Response(200, json={"id": "order_abc", "amount": 199950, "currency": "INR"})}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return state["response"]

    real_create_order = razorpay_client.create_order
    monkeypatch.setattr(
        "checkout_backend.payments.razorpay_client.create_order",
        functools.partial(real_create_order, transport=httpx.MockTransport(handler)),
    )
    return state


def test_preflight_returns_empty_200_with_cors(client: TestClient):
    res = client.options("/create-order")
    assert res.status_code == 200
    assert res.content == b""
    _assert_cors(res)


def test_create_order_end_to_end(client: TestClient, settings_rows, valid_credentials_rows, razorpay):
    settings_rows(valid_credentials_rows)
    res = client.post("/create-order", json={"amount": 1999.5, "currency": "INR", "receipt": "r1"})

    assert res.status_code == 200
    assert res.json() == {"order_id": "order_abc", "amount": 199950, "currency": "INR", "key_id": "rzp_test_public"}
    _assert_cors(res)

    assert len(razorpay["requests"]) == 1
    sent = razorpay["requests"][0]
    assert json.loads(sent.content) == {"amount": 199950, "currency": "INR", "receipt": "r1", "payment_capture": 1}
    assert sent.headers["Authorization"] == razorpay_client.basic_auth_header("rzp_test_public", "s3cr3t")
    # Le secret ne quitte jamais le serveur
    assert "s3cr3t" not in res.text


def test_create_order_defaults_currency(client: TestClient, settings_rows, valid_credentials_rows, razorpay):
    settings_rows(valid_credentials_rows)
    res = client.post("/create-order", json={"amount": 10, "receipt": "r9"})
    assert res.status_code == 200
    assert json.loads(razorpay["requests"][0].content)["currency"] == "INR"


@pytest.mark.parametrize(
    "body",
    [
        {"currency": "INR"},
        {"amount": 100},
        {"receipt": "r1"},
        {"amount": 0, "receipt": "r1"},
        {},
    ],
)
def test_missing_fields_returns_400(client: TestClient, razorpay, body):
    res = client.post("/create-order", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields: amount, receipt"}
    _assert_cors(res)
    assert razorpay["requests"] == []


def test_negative_amount_returns_400(client: TestClient, razorpay):
    res = client.post("/create-order", json={"amount": -10, "receipt": "r1"})
    assert res.status_code == 400
    assert razorpay["requests"] == []


def test_settings_store_empty_returns_config_error(client: TestClient, settings_rows, razorpay):
    settings_rows([])
    res = client.post("/create-order", json={"amount": 100, "receipt": "r1"})
    assert res.status_code == 500
    assert res.json() == {"error": "Payment gateway configuration error"}
    _assert_cors(res)
    assert razorpay["requests"] == []


def test_settings_store_unreachable_returns_config_error(client: TestClient, razorpay):
    res = client.post("/create-order", json={"amount": 100, "receipt": "r1"})
    assert res.status_code == 500
    assert res.json() == {"error": "Payment gateway configuration error"}
    assert razorpay["requests"] == []


def test_incomplete_credentials_never_contact_gateway(client: TestClient, settings_rows, razorpay):
    settings_rows([{"key": "razorpay_key_id", "value": "rzp_test_public"}])
    res = client.post("/create-order", json={"amount": 100, "receipt": "r1"})
    assert res.status_code == 500
    assert res.json() == {"error": "Razorpay not configured. Please configure in admin settings."}
    assert razorpay["requests"] == []


def test_upstream_rejection_is_forwarded(client: TestClient, settings_rows, valid_credentials_rows, razorpay):
    settings_rows(valid_credentials_rows)
    details = {"error": {"code": "BAD_REQUEST_ERROR", "description": "The api key provided is invalid"}}
    razorpay["response"] = httpx.Response(401, json=details)

    res = client.post("/create-order", json={"amount": 100, "receipt": "r1"})
    assert res.status_code == 401
    assert res.json() == {"error": "Failed to create Razorpay order", "details": details}
    _assert_cors(res)


def test_invalid_json_returns_internal_error(client: TestClient, razorpay):
    res = client.post("/create-order", content=b"{not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal server error"
    assert "message" in body
    _assert_cors(res)


def test_get_is_method_not_allowed_with_cors(client: TestClient):
    res = client.get("/create-order")
    assert res.status_code == 405
    assert res.json() == {"error": "Method Not Allowed"}
    assert res.headers["access-control-allow-origin"] == "*"
