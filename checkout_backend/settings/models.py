from typing import Dict
from checkout_backend.errors import StageResult, config_incomplete

RAZORPAY_KEY_ID = "razorpay_key_id"
RAZORPAY_KEY_SECRET = "razorpay_key_secret"
RAZORPAY_REQUIRED_KEYS = frozenset({RAZORPAY_KEY_ID, RAZORPAY_KEY_SECRET})


class RazorpayCredentials:
    """Identifiants marchands Razorpay (key_id public, key_secret privé)."""

    def __init__(self, key_id: str, key_secret: str):
        self.key_id = key_id
        self.key_secret = key_secret

    @classmethod
    def from_settings(cls, settings: Dict[str, str]) -> StageResult:
        """
        Construit les identifiants depuis le mapping de réglages.
        - ConfigIncomplete (avec les clés manquantes) si une clé requise est absente ou vide.
        """
        settings = settings or {}
        missing = [k for k in RAZORPAY_REQUIRED_KEYS if not (settings.get(k) or "").strip()]
        if missing:
            return StageResult.fail(config_incomplete(missing))
        return StageResult.ok(cls(settings[RAZORPAY_KEY_ID].strip(), settings[RAZORPAY_KEY_SECRET].strip()))

    def __repr__(self) -> str:
        return f"RazorpayCredentials(key_id={self.key_id!r})"
