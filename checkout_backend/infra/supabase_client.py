from typing import Optional
from supabase import create_client, Client
from checkout_backend.config import SUPABASE_URL, SUPABASE_SERVICE_KEY

_service_supabase: Optional[Client] = None

def get_service_supabase() -> Client:
    """
    Client Supabase 'service-role' (lecture de la table de réglages, RLS contourné).
    Créé paresseusement, une seule fois par processus.
    """
    global _service_supabase
    if not SUPABASE_SERVICE_KEY:
        raise RuntimeError("SUPABASE_SERVICE_KEY manquant pour get_service_supabase()")
    if not SUPABASE_URL:
        raise RuntimeError("SUPABASE_URL manquant pour get_service_supabase()")
    if _service_supabase is None:
        _service_supabase = create_client(SUPABASE_URL, SUPABASE_SERVICE_KEY)
    return _service_supabase
