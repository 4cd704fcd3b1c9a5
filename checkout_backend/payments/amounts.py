"""
Logique montants pure (pas de HTTP, pas de DB).
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict

from .models import OrderCreationRequest

# module checkout_backend.payments.amounts
def to_minor_units(amount: Decimal) -> int:
    """
    Convertit un montant en unités mineures (ex: roupies -> paise).
    - round(amount * 100) en ROUND_HALF_UP: les demi-centimes s'éloignent de zéro
      (10.005 -> 1001, 0.125 -> 13).
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def build_order_payload(req: OrderCreationRequest) -> Dict[str, Any]:
    """Body JSON attendu par l'API Orders Razorpay (capture automatique)."""
    return {
        "amount": to_minor_units(req.amount),
        "currency": req.currency,
        "receipt": req.receipt,
        "payment_capture": 1,
    }
