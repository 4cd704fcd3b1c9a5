# checkout_backend.config
from pathlib import Path
import os
from typing import Optional
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

TEMPLATES_DIR = Path(__file__).resolve().parent / "emails" / "templates"

"""
Configuration centrale du backend checkout.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les URLs/secrets (Supabase, Razorpay, fournisseur email)
- Fournit EmailSettings: configuration email validée une seule fois au démarrage
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _float_env(name: str, default: float) -> float:
    try:
        return float(_clean_env(os.getenv(name) or "") or default)
    except ValueError:
        return default

# Supabase: URL + clé service (lecture de la table de configuration côté serveur)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL") or "")
SUPABASE_SERVICE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_SERVICE_ROLE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# Table clé/valeur contenant les identifiants marchands
SETTINGS_TABLE = _clean_env(os.getenv("SETTINGS_TABLE") or "site_settings")

# Razorpay: endpoint de création de commande et devise par défaut
RAZORPAY_API_URL = _clean_env(os.getenv("RAZORPAY_API_URL") or "https://api.razorpay.com/v1/orders")
DEFAULT_CURRENCY = _clean_env(os.getenv("DEFAULT_CURRENCY") or "INR")

# Délai max des appels sortants (passerelle, fournisseur email)
HTTP_TIMEOUT_SECONDS = _float_env("HTTP_TIMEOUT_SECONDS", 10.0)

# Fournisseur d'email transactionnel (API HTTP + en-tête api-key)
EMAIL_API_URL = _clean_env(os.getenv("EMAIL_API_URL") or "https://api.brevo.com/v3/smtp/email")
EMAIL_API_KEY = _clean_env(os.getenv("EMAIL_API_KEY") or "")
EMAIL_SENDER_ADDRESS = _clean_env(os.getenv("EMAIL_SENDER_ADDRESS") or "")
EMAIL_SENDER_NAME = _clean_env(os.getenv("EMAIL_SENDER_NAME") or "")

# Habillage des emails
SITE_NAME = _clean_env(os.getenv("SITE_NAME") or "Velora Tradings")
CURRENCY_SYMBOL = _clean_env(os.getenv("CURRENCY_SYMBOL") or "₹")
ADMIN_EMAIL = _clean_env(os.getenv("ADMIN_EMAIL") or "admin@example.com")

# CORS (en-têtes renvoyés par les deux endpoints)
CORS_ALLOW_ORIGIN = _clean_env(os.getenv("CORS_ALLOW_ORIGIN") or "*")


class EmailSettings:
    """
    Configuration du fournisseur email, chargée une fois au démarrage (lifespan)
    puis injectée dans EmailDispatcher.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        sender_email: str,
        sender_name: str,
        site_name: str = "Velora Tradings",
        currency_symbol: str = "₹",
        admin_email: str = "admin@example.com",
        timeout: float = 10.0,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.sender_email = sender_email
        self.sender_name = sender_name or site_name
        self.site_name = site_name
        self.currency_symbol = currency_symbol
        self.admin_email = admin_email
        self.timeout = timeout

    def missing_fields(self) -> list:
        """Champs obligatoires absents (vide => configuration exploitable)."""
        required = {
            "EMAIL_API_URL": self.api_url,
            "EMAIL_API_KEY": self.api_key,
            "EMAIL_SENDER_ADDRESS": self.sender_email,
        }
        return [name for name, value in required.items() if not value]

    @property
    def is_valid(self) -> bool:
        return not self.missing_fields()

    def __repr__(self) -> str:
        # Jamais la clé API dans les logs
        return (
            f"EmailSettings(api_url={self.api_url!r}, sender_email={self.sender_email!r}, "
            f"sender_name={self.sender_name!r}, site_name={self.site_name!r})"
        )


def load_email_settings(environ: Optional[dict] = None) -> EmailSettings:
    """
    Construit EmailSettings depuis l'environnement (ou un dict fourni, utile en tests).
    - Ne lève pas: la validité est exposée via missing_fields()/is_valid.
    """
    if environ is None:
        return EmailSettings(
            api_url=EMAIL_API_URL,
            api_key=EMAIL_API_KEY,
            sender_email=EMAIL_SENDER_ADDRESS,
            sender_name=EMAIL_SENDER_NAME,
            site_name=SITE_NAME,
            currency_symbol=CURRENCY_SYMBOL,
            admin_email=ADMIN_EMAIL,
            timeout=HTTP_TIMEOUT_SECONDS,
        )
    env = {k: _clean_env(v) for k, v in environ.items()}
    return EmailSettings(
        api_url=env.get("EMAIL_API_URL") or EMAIL_API_URL,
        api_key=env.get("EMAIL_API_KEY", ""),
        sender_email=env.get("EMAIL_SENDER_ADDRESS", ""),
        sender_name=env.get("EMAIL_SENDER_NAME", ""),
        site_name=env.get("SITE_NAME") or "Velora Tradings",
        currency_symbol=env.get("CURRENCY_SYMBOL") or "₹",
        admin_email=env.get("ADMIN_EMAIL") or "admin@example.com",
        timeout=float(env.get("HTTP_TIMEOUT_SECONDS") or HTTP_TIMEOUT_SECONDS),
    )
