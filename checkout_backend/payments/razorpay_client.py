"""
Adaptateur Razorpay: centralise l'appel HTTP à l'API Orders.
"""
import base64
from typing import Any, Dict, Optional
import httpx

from checkout_backend.config import RAZORPAY_API_URL, HTTP_TIMEOUT_SECONDS
from checkout_backend.settings.models import RazorpayCredentials

# module checkout_backend.payments.razorpay_client
def basic_auth_header(key_id: str, key_secret: str) -> str:
    """En-tête Authorization HTTP Basic construit depuis "key_id:key_secret"."""
    token = base64.b64encode(f"{key_id}:{key_secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"

def create_order(
    payload: Dict[str, Any],
    credentials: RazorpayCredentials,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Response:
    """
    POST unique sur l'API Orders (pas de retry).
    - payload: {amount, currency, receipt, payment_capture}
    - Retour: la réponse brute; l'interprétation du statut est faite par le service.
    - Lève httpx.HTTPError en cas d'échec réseau/timeout.
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": basic_auth_header(credentials.key_id, credentials.key_secret),
    }
    with httpx.Client(timeout=HTTP_TIMEOUT_SECONDS, transport=transport) as client:
        return client.post(RAZORPAY_API_URL, json=payload, headers=headers)
