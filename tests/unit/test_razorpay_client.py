import base64
import json
import httpx
import pytest

from checkout_backend.payments import razorpay_client
from checkout_backend.settings.models import RazorpayCredentials


def test_basic_auth_header_encodes_key_id_and_secret():
    header = razorpay_client.basic_auth_header("rzp_test_public", "s3cr3t")
    assert header.startswith("Basic ")
    assert base64.b64decode(header[len("Basic "):]).decode() == "rzp_test_public:s3cr3t"


def test_create_order_posts_payload_with_basic_auth():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["content_type"] = request.headers.get("Content-Type")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "order_abc", "amount": 199950, "currency": "INR"})

    payload = {"amount": 199950, "currency": "INR", "receipt": "r1", "payment_capture": 1}
    resp = razorpay_client.create_order(
        payload,
        RazorpayCredentials("rzp_test_public", "s3cr3t"),
        transport=httpx.MockTransport(handler),
    )

    assert resp.status_code == 200
    assert resp.json()["id"] == "order_abc"
    assert seen["method"] == "POST"
    assert seen["url"] == "https://api.razorpay.com/v1/orders"
    assert seen["auth"] == razorpay_client.basic_auth_header("rzp_test_public", "s3cr3t")
    assert seen["content_type"] == "application/json"
    assert seen["body"] == payload


def test_create_order_returns_non_success_response_as_is():
    transport = httpx.MockTransport(lambda request: httpx.Response(401, json={"error": {"code": "BAD_REQUEST_ERROR"}}))
    resp = razorpay_client.create_order({"amount": 100}, RazorpayCredentials("k", "s"), transport=transport)
    assert resp.status_code == 401


def test_create_order_network_error_propagates():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.HTTPError):
        razorpay_client.create_order({"amount": 100}, RazorpayCredentials("k", "s"), transport=httpx.MockTransport(handler))
