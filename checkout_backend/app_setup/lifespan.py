"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Charge et valide une seule fois la configuration du fournisseur email (EmailSettings).
- Une configuration incomplète n'empêche pas le démarrage: /create-order reste
  servi, /send-order-email répond 500 tant que la configuration manque.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from checkout_backend.config import load_email_settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Expose app.state.email_settings aux dépendances des vues.
    Les logs indiquent l'état effectif (configuré / champs manquants).
    """
    logger = logging.getLogger("uvicorn.error")
    settings = load_email_settings()
    app.state.email_settings = settings
    missing = settings.missing_fields()
    if missing:
        logger.warning("Email provider not configured, missing: %s", ", ".join(missing))
    else:
        logger.info("Email provider configured: %r", settings)

    yield
