"""
Module 'payments' (feature-first): point d'entrée public.
Réunit validation de la requête, conversion des montants, client Razorpay et service.
"""

from .models import OrderCreationRequest, PaymentOrder, parse_order_request
from .amounts import to_minor_units, build_order_payload
from .razorpay_client import basic_auth_header, create_order as post_razorpay_order
from .service import create_order, create_order_from_payload

__all__ = [
    # models
    "OrderCreationRequest",
    "PaymentOrder",
    "parse_order_request",
    # amounts
    "to_minor_units",
    "build_order_payload",
    # razorpay
    "basic_auth_header",
    "post_razorpay_order",
    # services
    "create_order",
    "create_order_from_payload",
]
