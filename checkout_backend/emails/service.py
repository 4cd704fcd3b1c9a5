"""
Cas d'usage 'emails': valide la requête, rend le HTML, délègue l'envoi.
"""
from typing import Any
import logging
from pydantic import ValidationError

from checkout_backend.config import EmailSettings
from checkout_backend.errors import (
    CONFIG_MISSING,
    CheckoutError,
    StageResult,
    dispatch_failure,
    handle_exception,
    validation_error,
)
from . import renderer
from .models import OrderEmailRequest
from .sender import EmailDispatcher

logger = logging.getLogger(__name__)

DISPATCH_WARNING = (
    "Order was placed successfully but email notification failed. "
    "Please check the email provider configuration."
)

def parse_email_request(payload: Any, settings: EmailSettings) -> StageResult:
    """
    Valide {to, subject, orderData, sendToAdmin?}.
    - subject/orderData absents => 400 "Missing required fields"
    - pas de destinataire (to vide et sendToAdmin faux) => 400
    - orderData non conforme (quantité <= 0, date illisible, ...) => 400
    """
    body = payload if isinstance(payload, dict) else {}
    if not body.get("subject") or not body.get("orderData"):
        return StageResult.fail(validation_error("Missing required fields"))

    send_to_admin = bool(body.get("sendToAdmin"))
    recipient = settings.admin_email if send_to_admin else str(body.get("to") or "").strip()
    if not recipient:
        return StageResult.fail(validation_error("No recipient email address"))

    try:
        req = OrderEmailRequest.model_validate({**body, "to": recipient, "sendToAdmin": send_to_admin})
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err.get("loc", ())) for err in e.errors()})
        logger.warning("emails.parse invalid orderData fields=%s", fields)
        return StageResult.fail(validation_error(f"Invalid order data: {', '.join(fields)}"))
    return StageResult.ok(req)

def render_email(req: OrderEmailRequest, settings: EmailSettings) -> str:
    render = renderer.render_admin if req.send_to_admin else renderer.render
    return render(req.order_data, site_name=settings.site_name, currency_symbol=settings.currency_symbol)

def send_order_email(payload: Any, settings: EmailSettings, dispatcher: EmailDispatcher) -> StageResult:
    """
    Pipeline complet pour POST /send-order-email:
      1) valider le body (400, aucun appel externe)
      2) vérifier la configuration du fournisseur (500 sans appel)
      3) rendre le HTML (client ou admin)
      4) envoyer (échec => DispatchFailure 500)
    """
    try:
        parsed = parse_email_request(payload, settings)
        if not parsed.success:
            return parsed
        req = parsed.value

        missing = settings.missing_fields()
        if missing:
            logger.error("emails.send_order_email provider not configured missing=%s", missing)
            return StageResult.fail(CheckoutError(CONFIG_MISSING, "Email provider not configured", status_code=500))

        html = render_email(req, settings)
        if not dispatcher.send(req.to, req.subject, html):
            return StageResult.fail(dispatch_failure(warning=DISPATCH_WARNING))

        logger.info("emails.send_order_email ok order_id=%s admin=%s", req.order_data.order_id, req.send_to_admin)
        return StageResult.ok({"success": True, "message": "Email sent successfully"})
    except Exception as e:
        return handle_exception("send_order_email", e)
