"""
Factory d'application recommandée pour les entrypoints (ex: checkout_backend.asgi).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from fastapi import FastAPI
from .lifespan import lifespan
from .exceptions import register_exception_handlers
from .routers import register_routers

def create_app() -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - gestionnaires d'exceptions (enveloppes JSON + CORS)
      - routers checkout et health
    Pas de CORSMiddleware: il répondrait lui-même aux preflights (body "OK"),
    les vues posent leurs propres en-têtes CORS.
    Retour:
      FastAPI prêt à être utilisé par le serveur ASGI.
    """
    app = FastAPI(title="Checkout Backend", lifespan=lifespan)
    register_exception_handlers(app)
    register_routers(app)
    return app
