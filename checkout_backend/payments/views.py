import logging

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from checkout_backend.errors import internal_error
from checkout_backend.utils import cors
from checkout_backend.payments import service as payments_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Payments"])

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"

# module checkout_backend.payments.views
@router.options("/create-order", include_in_schema=False)
async def create_order_preflight():
    return cors.preflight_response(ALLOWED_METHODS)

@router.post("/create-order")
async def create_order(request: Request):
    """
    Crée une commande Razorpay pour le checkout.
    - Entrée JSON: { "amount": <nombre>, "currency": "INR" (optionnel), "receipt": "<ref>" }
    - Sortie 200: { "order_id", "amount" (unités mineures), "currency", "key_id" }
    - Erreurs: 400 champs manquants, 500 configuration/erreur interne,
      statut Razorpay relayé si la passerelle refuse la commande.
    """
    try:
        try:
            payload = await request.json()
        except ValueError as e:
            logger.warning("payments.create_order invalid JSON body: %s", e)
            return cors.error_response(internal_error(e), ALLOWED_METHODS)

        # Appels bloquants (Supabase, httpx) hors de la boucle d'événements
        result = await run_in_threadpool(payments_service.create_order_from_payload, payload)
        if not result.success:
            return cors.error_response(result.error, ALLOWED_METHODS)
        return cors.json_response(result.value.to_response(), ALLOWED_METHODS)
    except Exception as e:
        logger.exception("Erreur create_order")
        return cors.error_response(internal_error(e), ALLOWED_METHODS)
