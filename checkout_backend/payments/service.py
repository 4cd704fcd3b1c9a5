"""
Cas d'usage 'payments': orchestre réglages, validation, client Razorpay.
"""
from typing import Any
import logging
import httpx

from checkout_backend.errors import StageResult, handle_exception, internal_error, upstream_error
from checkout_backend.settings import repository as settings_repository
from checkout_backend.settings.models import RazorpayCredentials, RAZORPAY_REQUIRED_KEYS
from . import razorpay_client
from .amounts import build_order_payload
from .models import OrderCreationRequest, PaymentOrder, parse_order_request

logger = logging.getLogger(__name__)

def _response_body(resp: httpx.Response) -> Any:
    """Body upstream tel quel: JSON si possible, sinon texte brut."""
    try:
        return resp.json()
    except ValueError:
        return resp.text

def create_order(req: OrderCreationRequest, credentials: RazorpayCredentials) -> StageResult:
    """
    Crée la commande Razorpay pour une requête déjà validée.
    - Succès: value = PaymentOrder (avec le key_id public, jamais le secret)
    - Statut non-2xx: UpstreamError (statut + body upstream)
    - Réseau/parsing: InternalError
    """
    payload = build_order_payload(req)
    try:
        resp = razorpay_client.create_order(payload, credentials)
    except httpx.HTTPError as e:
        logger.exception("payments.create_order network error receipt=%s", req.receipt)
        return StageResult.fail(internal_error(e))

    if not resp.is_success:
        details = _response_body(resp)
        logger.error("payments.create_order rejected status=%s receipt=%s body=%s", resp.status_code, req.receipt, details)
        return StageResult.fail(upstream_error(resp.status_code, details))

    try:
        data = resp.json()
        order = PaymentOrder(
            order_id=str(data["id"]),
            amount_minor_units=int(data["amount"]),
            currency=str(data["currency"]),
            public_key_id=credentials.key_id,
        )
    except (ValueError, KeyError, TypeError) as e:
        logger.exception("payments.create_order unreadable gateway response receipt=%s", req.receipt)
        return StageResult.fail(internal_error(e))

    logger.info("payments.create_order ok order_id=%s amount=%s currency=%s", order.order_id, order.amount_minor_units, order.currency)
    return StageResult.ok(order)

def create_order_from_payload(payload: Any) -> StageResult:
    """
    Pipeline complet pour POST /create-order:
      1) valider le body (400 avant tout appel externe)
      2) relire les identifiants marchands (ConfigMissing si store vide/injoignable)
      3) construire RazorpayCredentials (ConfigIncomplete => aucun appel passerelle)
      4) créer la commande Razorpay
    """
    try:
        parsed = parse_order_request(payload)
        if not parsed.success:
            return parsed

        settings = settings_repository.fetch_settings(RAZORPAY_REQUIRED_KEYS)
        if not settings.success:
            return settings

        creds = RazorpayCredentials.from_settings(settings.value)
        if not creds.success:
            logger.error("payments.create_order credentials incomplete missing=%s", getattr(creds.error, "missing_keys", []))
            return creds

        return create_order(parsed.value, creds.value)
    except Exception as e:
        return handle_exception("create_order_from_payload", e)
