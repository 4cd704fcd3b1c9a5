"""
Gestionnaires d'exceptions de l'application.
- HTTPException (404, 405, ...) => enveloppe {"error": ...} avec en-têtes CORS.
- Toute exception non interceptée par une vue => 500 JSON avec en-têtes CORS,
  pour que le client cross-origin voie l'erreur réelle.
"""
import logging
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from checkout_backend.errors import internal_error
from checkout_backend.utils import cors

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre les handlers HTTPException et Exception.
    - Réponses JSON uniformes: {"error": "..."}.
    """
    @app.exception_handler(StarletteHTTPException)
    async def http_error_envelope(request: Request, exc: StarletteHTTPException):
        response = cors.json_response({"error": str(exc.detail)}, status_code=exc.status_code)
        for name, value in (getattr(exc, "headers", None) or {}).items():
            response.headers[name] = value
        return response

    @app.exception_handler(Exception)
    async def unhandled_error_envelope(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return cors.error_response(internal_error(exc))
