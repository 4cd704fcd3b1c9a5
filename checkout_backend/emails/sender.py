"""
Adaptateur du fournisseur d'email transactionnel (API HTTP JSON + en-tête api-key).
"""
from typing import Any, Dict, Optional
import logging
import httpx

from checkout_backend.config import EmailSettings

logger = logging.getLogger(__name__)


class EmailDispatcher:
    """
    Envoie un email HTML à un destinataire unique.
    - send() ne lève jamais: tout échec (statut non-2xx, réseau, autre) => False + log.
    """

    def __init__(self, settings: EmailSettings, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def build_payload(self, to: str, subject: str, html: str) -> Dict[str, Any]:
        return {
            "sender": {"email": self.settings.sender_email, "name": self.settings.sender_name},
            "to": [{"email": to}],
            "subject": subject,
            "htmlContent": html,
        }

    def send(self, to: str, subject: str, html: str) -> bool:
        headers = {
            "api-key": self.settings.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        try:
            with httpx.Client(timeout=self.settings.timeout, transport=self.transport) as client:
                resp = client.post(self.settings.api_url, json=self.build_payload(to, subject, html), headers=headers)
        except httpx.HTTPError as e:
            logger.error("emails.send network error to=%s: %s", to, e)
            return False
        except Exception:
            logger.exception("emails.send unexpected failure to=%s", to)
            return False

        if not resp.is_success:
            logger.error("emails.send rejected status=%s to=%s body=%s", resp.status_code, to, resp.text)
            return False

        logger.info("emails.send ok to=%s", to)
        return True
