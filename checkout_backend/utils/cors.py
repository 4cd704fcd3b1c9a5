"""
En-têtes CORS et enveloppes JSON communes aux endpoints checkout.

Chaque réponse (succès, erreur, preflight) porte les en-têtes CORS: sans eux,
un appelant cross-origin ne voit qu'une erreur réseau opaque.
"""
from typing import Any, Dict
from fastapi.responses import JSONResponse, Response

from checkout_backend.config import CORS_ALLOW_ORIGIN
from checkout_backend.errors import CheckoutError

ALLOW_HEADERS = "Content-Type, Authorization, X-Client-Info, Apikey"
DEFAULT_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"

def cors_headers(methods: str = DEFAULT_ALLOW_METHODS) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": methods,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }

def preflight_response(methods: str = DEFAULT_ALLOW_METHODS) -> Response:
    """Réponse au preflight OPTIONS: 200, body vide."""
    return Response(status_code=200, headers=cors_headers(methods))

def json_response(content: Any, methods: str = DEFAULT_ALLOW_METHODS, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=cors_headers(methods))

def error_response(error: CheckoutError, methods: str = DEFAULT_ALLOW_METHODS) -> JSONResponse:
    return json_response(error.to_response_body(), methods, status_code=error.status_code)
