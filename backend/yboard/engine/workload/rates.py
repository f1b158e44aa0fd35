# engine/workload/rates.py
"""
Résolution du taux horaire effectif d'une relation : ZÉRO accès DB.

Priorité :
    1. taux spécifique porté par la relation (même 0)
    2. taux par défaut du teacher
    3. 0
"""
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def to_number(value: Any) -> float:
    """Numeric SQL (Decimal), int, float ou str → float. Illisible → 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(Decimal(str(value)))
    except (InvalidOperation, ValueError):
        return 0.0


def resolve_rate(relation: Any, teacher: Optional[Any] = None) -> float:
    override = getattr(relation, "rate", None)
    if override is not None:
        return to_number(override)

    if teacher is None:
        teacher = getattr(relation, "teacher", None)
    default = getattr(teacher, "rate", None) if teacher is not None else None
    if default:
        return to_number(default)

    return 0.0
