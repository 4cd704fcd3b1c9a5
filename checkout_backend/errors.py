"""
Taxonomie d'erreurs du checkout et objets résultat.

Chaque étape (lecture des réglages, création de commande, envoi d'email)
renvoie un StageResult au lieu de lever une exception; la vue convertit
ensuite le résultat en enveloppe JSON (voir to_response_body / status_code).
"""
from typing import Any, Dict, Iterable, Optional
import logging

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "validation_error"
CONFIG_MISSING = "config_missing"
CONFIG_INCOMPLETE = "config_incomplete"
UPSTREAM_ERROR = "upstream_error"
DISPATCH_FAILURE = "dispatch_failure"
INTERNAL_ERROR = "internal_error"

CONFIG_ERRORS = (CONFIG_MISSING, CONFIG_INCOMPLETE)


class CheckoutError:
    def __init__(
        self,
        kind: str,
        message: str,
        status_code: int = 500,
        details: Any = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.details = details
        self.extra = extra or {}

    @property
    def is_config_error(self) -> bool:
        return self.kind in CONFIG_ERRORS

    def to_response_body(self) -> Dict[str, Any]:
        """Enveloppe JSON renvoyée au client: {"error": ..., [details], [champs extra]}."""
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        body.update(self.extra)
        return body

    def __repr__(self) -> str:
        return f"CheckoutError(kind={self.kind!r}, status_code={self.status_code}, message={self.message!r})"


class StageResult:
    def __init__(self, success: bool, value: Any = None, error: Optional[CheckoutError] = None):
        self.success = success
        self.value = value
        self.error = error

    @classmethod
    def ok(cls, value: Any = None) -> "StageResult":
        return cls(True, value=value)

    @classmethod
    def fail(cls, error: CheckoutError) -> "StageResult":
        return cls(False, error=error)


def validation_error(message: str) -> CheckoutError:
    return CheckoutError(VALIDATION_ERROR, message, status_code=400)

def config_missing(message: str = "Payment gateway configuration error") -> CheckoutError:
    return CheckoutError(CONFIG_MISSING, message, status_code=500)

def config_incomplete(missing_keys: Iterable[str], message: Optional[str] = None) -> CheckoutError:
    error = CheckoutError(
        CONFIG_INCOMPLETE,
        message or "Razorpay not configured. Please configure in admin settings.",
        status_code=500,
    )
    # Conservé côté serveur (logs/tests), jamais renvoyé au client
    error.missing_keys = sorted(missing_keys)
    return error

def upstream_error(status_code: int, body: Any, message: str = "Failed to create Razorpay order") -> CheckoutError:
    return CheckoutError(UPSTREAM_ERROR, message, status_code=status_code, details=body)

def dispatch_failure(message: str = "Failed to send email", warning: Optional[str] = None) -> CheckoutError:
    extra = {"warning": warning} if warning else None
    return CheckoutError(DISPATCH_FAILURE, message, status_code=500, extra=extra)

def internal_error(exc: Optional[BaseException] = None, message: str = "Internal server error") -> CheckoutError:
    extra = {"message": str(exc)} if exc is not None else None
    return CheckoutError(INTERNAL_ERROR, message, status_code=500, extra=extra)

def handle_exception(action: str, e: Exception) -> StageResult:
    """Journalise une exception inattendue et la convertit en InternalError."""
    logger.exception(f"Erreur {action}")
    return StageResult.fail(internal_error(e))
