"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `checkout_backend.asgi:app`.
- Toute la configuration FastAPI est centralisée dans checkout_backend.app_setup.factory.
"""

from checkout_backend.app_setup.factory import create_app

app = create_app()

if __name__ == "__main__":
    # Exécution directe utile en développement local (uvicorn standalone).
    import os
    import uvicorn
    uvicorn.run(
        "checkout_backend.asgi:app",
        host="0.0.0.0",  # écoute toutes interfaces (Docker/VM)
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
