"""
Module 'emails' (feature-first): point d'entrée public.
Réunit modèles de commande, rendu HTML (Jinja2), dispatcher HTTP et service.
"""

from .models import OrderData, OrderItem, ShippingAddress, OrderEmailRequest
from .renderer import render, render_admin, format_amount, display_order_id, payment_method_label
from .sender import EmailDispatcher
from .service import send_order_email

__all__ = [
    # models
    "OrderData",
    "OrderItem",
    "ShippingAddress",
    "OrderEmailRequest",
    # rendu
    "render",
    "render_admin",
    "format_amount",
    "display_order_id",
    "payment_method_label",
    # envoi
    "EmailDispatcher",
    "send_order_email",
]
