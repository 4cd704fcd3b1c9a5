import logging

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from checkout_backend.config import EmailSettings, load_email_settings
from checkout_backend.errors import internal_error
from checkout_backend.utils import cors
from checkout_backend.emails import service as emails_service
from checkout_backend.emails.sender import EmailDispatcher

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Emails"])

ALLOWED_METHODS = "POST, OPTIONS"

def get_email_settings(request: Request) -> EmailSettings:
    """Configuration chargée par le lifespan; rechargée depuis l'env si absente (app sans lifespan)."""
    settings = getattr(request.app.state, "email_settings", None)
    if settings is None:
        settings = load_email_settings()
        request.app.state.email_settings = settings
    return settings

def get_email_dispatcher(settings: EmailSettings = Depends(get_email_settings)) -> EmailDispatcher:
    return EmailDispatcher(settings)

# module checkout_backend.emails.views
@router.options("/send-order-email", include_in_schema=False)
async def send_order_email_preflight():
    return cors.preflight_response(ALLOWED_METHODS)

@router.post("/send-order-email")
async def send_order_email(
    request: Request,
    settings: EmailSettings = Depends(get_email_settings),
    dispatcher: EmailDispatcher = Depends(get_email_dispatcher),
):
    """
    Envoie l'email de confirmation de commande (ou la notification admin).
    - Entrée JSON: { "to", "subject", "orderData": {...}, "sendToAdmin": false }
    - Sortie 200: { "success": true, "message": "Email sent successfully" }
    - Erreurs: 400 champs manquants/invalides, 500 configuration ou envoi échoué.
    """
    try:
        try:
            payload = await request.json()
        except ValueError as e:
            logger.warning("emails.send_order_email invalid JSON body: %s", e)
            return cors.error_response(internal_error(e), ALLOWED_METHODS)

        result = await run_in_threadpool(emails_service.send_order_email, payload, settings, dispatcher)
        if not result.success:
            return cors.error_response(result.error, ALLOWED_METHODS)
        return cors.json_response(result.value, ALLOWED_METHODS)
    except Exception as e:
        logger.exception("Erreur send_order_email")
        return cors.error_response(internal_error(e), ALLOWED_METHODS)
