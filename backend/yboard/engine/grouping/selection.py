# engine/grouping/selection.py
"""
Persistance de la sélection de promos affichées.

Le slot contient un tableau JSON de clés de groupe ("B1 Informatique", ...).
C'est un ensemble : seule l'appartenance compte, pas l'ordre.

Lecture tolérante : slot absent ou corrompu → ensemble vide, jamais
d'exception. L'appelant interprète l'ensemble vide comme "tout afficher"
(resolve_visible_promos).
"""
import json
from typing import Iterable, List, Optional, Set

from yboard.core.logging import get_logger
from yboard.infra.preferences import PreferenceStore

logger = get_logger(__name__)

STORAGE_KEY = "yboard-selected-promos"


def parse_selection(raw: Optional[str]) -> Set[str]:
    if not raw:
        return set()
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("promo_selection_malformed", reason="invalid_json")
        return set()
    if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
        logger.warning("promo_selection_malformed", reason="not_a_string_list")
        return set()
    return set(parsed)


def serialize_selection(promos: Iterable[str]) -> str:
    # Tri : sortie déterministe pour un même ensemble
    return json.dumps(sorted(set(promos)), ensure_ascii=False)


async def load_selected_promos(store: PreferenceStore) -> Set[str]:
    return parse_selection(await store.get(STORAGE_KEY))


async def save_selected_promos(store: PreferenceStore, promos: Iterable[str]) -> None:
    await store.set(STORAGE_KEY, serialize_selection(promos))


def resolve_visible_promos(selection: Set[str], known_groups: Iterable[str]) -> List[str]:
    """Groupes à afficher, dans l'ordre de known_groups."""
    known = list(known_groups)
    if not selection:
        return known
    return [group for group in known if group in selection]
