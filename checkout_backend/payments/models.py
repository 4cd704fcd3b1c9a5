"""
Modèles 'payments': requête de création de commande et commande Razorpay créée.
"""
from decimal import Decimal
from typing import Any, Dict
from pydantic import BaseModel, Field, ValidationError

from checkout_backend.config import DEFAULT_CURRENCY
from checkout_backend.errors import StageResult, validation_error

MISSING_FIELDS_MESSAGE = "Missing required fields: amount, receipt"


class OrderCreationRequest(BaseModel):
    amount: Decimal = Field(gt=0)
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=1)
    receipt: str = Field(min_length=1)


class PaymentOrder:
    """Commande créée côté passerelle (montant en unités mineures, ex: paise)."""

    def __init__(self, order_id: str, amount_minor_units: int, currency: str, public_key_id: str):
        self.order_id = order_id
        self.amount_minor_units = amount_minor_units
        self.currency = currency
        self.public_key_id = public_key_id

    def to_response(self) -> Dict[str, Any]:
        # key_id est public: le widget checkout côté client en a besoin
        return {
            "order_id": self.order_id,
            "amount": self.amount_minor_units,
            "currency": self.currency,
            "key_id": self.public_key_id,
        }


def _is_missing(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return value == 0
    return False

def parse_order_request(payload: Any) -> StageResult:
    """
    Valide le body JSON {amount, currency?, receipt}.
    - amount/receipt absents, nuls ou vides => ValidationError (400)
    - amount non numérique ou <= 0 => ValidationError (400)
    - currency absente => devise par défaut (INR)
    """
    body = payload if isinstance(payload, dict) else {}
    amount = body.get("amount")
    receipt = body.get("receipt")
    if _is_missing(amount) or _is_missing(receipt):
        return StageResult.fail(validation_error(MISSING_FIELDS_MESSAGE))

    if isinstance(amount, bool):
        return StageResult.fail(validation_error("amount must be a positive number"))
    # str(float) donne la représentation décimale la plus courte (1999.5 et non 1999.4999...)
    if isinstance(amount, (int, float)):
        amount = str(amount)

    try:
        req = OrderCreationRequest(
            amount=amount,
            currency=str(body.get("currency") or DEFAULT_CURRENCY),
            receipt=str(receipt),
        )
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        if "amount" in fields:
            return StageResult.fail(validation_error("amount must be a positive number"))
        return StageResult.fail(validation_error(f"Invalid fields: {', '.join(fields)}"))
    return StageResult.ok(req)
