"""
Accès en lecture à la table de réglages (clé/valeur) Supabase.
"""
from typing import Dict, Iterable
import logging
import checkout_backend.infra.supabase_client as supabase_client
from checkout_backend.config import SETTINGS_TABLE
from checkout_backend.errors import StageResult, config_missing

logger = logging.getLogger(__name__)

# module checkout_backend.settings.repository
def fetch_settings(keys: Iterable[str]) -> StageResult:
    """
    Lit exactement les clés demandées dans la table de réglages.
    - Succès: value = {key: value} limité aux clés présentes.
    - ConfigMissing si le store est injoignable ou ne renvoie aucune ligne.
    Aucune mise en cache: chaque appel relit la table.
    """
    wanted = sorted({str(k) for k in keys if k})
    try:
        res = (
            supabase_client.get_service_supabase()
            .table(SETTINGS_TABLE)
            .select("key, value")
            .in_("key", wanted)
            .execute()
        )
    except Exception:
        logger.exception("settings.repository.fetch_settings failed keys=%s", wanted)
        return StageResult.fail(config_missing())

    rows = res.data or []
    if not rows:
        logger.error("settings.repository.fetch_settings no rows keys=%s", wanted)
        return StageResult.fail(config_missing())

    values: Dict[str, str] = {}
    for row in rows:
        key = str((row or {}).get("key") or "")
        if key in wanted:
            values[key] = "" if row.get("value") is None else str(row.get("value"))
    return StageResult.ok(values)
