"""
Registre central des routers (checkout, health).
- Checkout: /create-order (payments), /send-order-email (emails)
- Health: /health
"""
from fastapi import FastAPI
from checkout_backend.payments import views as payments_views
from checkout_backend.emails import views as emails_views
from checkout_backend.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """
    Agrège tous les routers de l'application.
    - Les deux endpoints checkout sont indépendants; seules les conventions
      CORS/enveloppe sont partagées (checkout_backend.utils.cors).
    """
    app.include_router(payments_views.router)
    app.include_router(emails_views.router)
    # Health & monitoring
    app.include_router(health_router)
