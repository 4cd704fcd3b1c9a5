"""
Rendu HTML des emails de commande (pur: pas d'I/O réseau, déterministe).

Règles d'affichage reprises du storefront:
- prix groupés par milliers, jusqu'à 3 décimales, sans zéros forcés (1,999.5)
- identifiant de commande: 8 derniers caractères en majuscules
- date longue "5 March 2025"
- moyen de paiement: "cod" => Cash on Delivery, tout le reste => Online Payment

Les champs texte du client (nom, adresse) sont insérés tels quels, sans
échappement HTML (autoescape désactivé): un contenu contenant du balisage est
rendu comme balisage.
"""
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from checkout_backend.config import TEMPLATES_DIR
from .models import OrderData

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

CUSTOMER_TEMPLATE = "order_customer.html"
ADMIN_TEMPLATE = "order_admin.html"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)

# module checkout_backend.emails.renderer
def format_amount(value: Any) -> str:
    """Format groupé type toLocaleString(): 1999.5 -> "1,999.5", 1000 -> "1,000"."""
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    amount = amount.quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    integer, _, fraction = f"{abs(amount):f}".partition(".")
    fraction = fraction.rstrip("0")
    grouped = f"{int(integer):,}"
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"

def display_order_id(order_id: str) -> str:
    return (order_id or "")[-8:].upper()

def format_order_date(value: datetime) -> str:
    """Date longue en-IN: "<jour> <mois> <année>" (UTC si la date porte un fuseau)."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{value.day} {MONTHS[value.month - 1]} {value.year}"

def payment_method_label(method: str) -> str:
    return "Cash on Delivery" if method == "cod" else "Online Payment"

def _item_rows(data: OrderData) -> List[Dict[str, Any]]:
    return [
        {
            "name": item.name,
            "quantity": item.quantity,
            "price": format_amount(item.price),
            "total": format_amount(item.price * item.quantity),
        }
        for item in data.items
    ]

def build_context(data: OrderData, *, site_name: str, currency_symbol: str) -> Dict[str, Any]:
    address = data.shipping_address
    return {
        "site_name": site_name,
        "currency": currency_symbol,
        "customer_name": data.customer_name,
        "display_id": display_order_id(data.order_id),
        "order_date": format_order_date(data.order_date),
        "payment_label": payment_method_label(data.payment_method),
        "items": _item_rows(data),
        "total_amount": format_amount(data.total_amount),
        "address": {
            "full_name": address.full_name,
            "address": address.address,
            "city": address.city,
            "state": address.state,
            "zip_code": address.zip_code,
            "phone": address.phone,
        },
        "year": data.order_date.year,
    }

def render(data: OrderData, *, site_name: str = "Velora Tradings", currency_symbol: str = "₹") -> str:
    """Email de confirmation destiné au client."""
    context = build_context(data, site_name=site_name, currency_symbol=currency_symbol)
    return _env.get_template(CUSTOMER_TEMPLATE).render(**context)

def render_admin(data: OrderData, *, site_name: str = "Velora Tradings", currency_symbol: str = "₹") -> str:
    """Notification 'nouvelle commande' destinée à l'administrateur de la boutique."""
    context = build_context(data, site_name=site_name, currency_symbol=currency_symbol)
    return _env.get_template(ADMIN_TEMPLATE).render(**context)
