# engine/grouping/promos.py
"""
Regroupement des lignes PromoModule par promo : ZÉRO accès DB.

Clé de groupe : "<level> <specialty>" (un seul espace).
L'ordre est celui de l'entrée : l'appelant trie en amont
(level, specialty, nom du module) pour un affichage stable.
"""
from collections import OrderedDict
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def promo_key(row: Any) -> str:
    level = _field(row, "level")
    if isinstance(level, Enum):
        level = level.value
    return f"{level} {_field(row, 'specialty')}"


def group_by_promo(rows: Iterable[Any]) -> Dict[str, List[Any]]:
    grouped: "OrderedDict[str, List[Any]]" = OrderedDict()
    for row in rows:
        grouped.setdefault(promo_key(row), []).append(row)
    return grouped
