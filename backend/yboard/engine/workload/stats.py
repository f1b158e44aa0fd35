# engine/workload/stats.py
"""
Agrégation de charge et de coût : ZÉRO accès DB.

Reçoit un PromoModule (ORM ou SimpleNamespace) exposant :
    workload, ongoing, potential, selected
Chaque relation expose : workload, rate, teacher (optionnel).

Règle métier centrale :
    Seuls les "selected" comptent dans la couverture.
    - ongoing   = 100 % de la charge de l'année passée (information isolée)
    - potential = candidats multiples, non confirmés
"""
from dataclasses import dataclass, asdict
from typing import Any, Iterable, List, Optional

from yboard.engine.workload.rates import resolve_rate
from yboard.shared.enums import WorkloadStatus

# Seuils de classification (en % de couverture)
UNDER_THRESHOLD    = 50.0
ADEQUATE_THRESHOLD = 80.0
FULL_COVERAGE      = 100.0


@dataclass
class WorkloadStats:
    base_workload: int
    ongoing_total: int
    potential_total: int
    selected_total: int
    total_assigned: int
    coverage: float            # % arrondi à 2 décimales
    remaining: int
    status: WorkloadStatus
    ongoing_cost: float
    potential_cost: float
    selected_cost: float
    average_ongoing_rate: float
    average_potential_rate: float
    average_selected_rate: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TeacherStats:
    total_relations: int
    total_workload: int
    ongoing_workload: int
    potential_workload: int
    selected_workload: int
    selected_cost: float


def _as_list(relations: Optional[Iterable[Any]]) -> List[Any]:
    return list(relations) if relations else []


def total_workload(relations: Optional[Iterable[Any]]) -> int:
    return sum(getattr(r, "workload", 0) or 0 for r in _as_list(relations))


def total_cost(relations: Optional[Iterable[Any]], teacher: Optional[Any] = None) -> float:
    """Σ workload × taux effectif. `teacher` force le teacher (vue fiche teacher)."""
    cost = 0.0
    for relation in _as_list(relations):
        owner = teacher if teacher is not None else getattr(relation, "teacher", None)
        cost += (getattr(relation, "workload", 0) or 0) * resolve_rate(relation, owner)
    return round(cost, 2)


def _average_rate(cost: float, workload: int) -> float:
    if workload <= 0:
        return 0.0
    return round(cost / workload, 2)


def classify_coverage(coverage: float) -> WorkloadStatus:
    if coverage < UNDER_THRESHOLD:
        return WorkloadStatus.UNDER_ALLOCATED
    if coverage < ADEQUATE_THRESHOLD:
        return WorkloadStatus.PARTIALLY_ALLOCATED
    if coverage <= FULL_COVERAGE:
        return WorkloadStatus.ADEQUATELY_ALLOCATED
    return WorkloadStatus.OVER_ALLOCATED


def compute_stats(promo_module: Any) -> WorkloadStats:
    base = getattr(promo_module, "workload", 0) or 0

    ongoing   = _as_list(getattr(promo_module, "ongoing", None))
    potential = _as_list(getattr(promo_module, "potential", None))
    selected  = _as_list(getattr(promo_module, "selected", None))

    ongoing_total   = total_workload(ongoing)
    potential_total = total_workload(potential)
    selected_total  = total_workload(selected)

    total_assigned = selected_total
    coverage = round(total_assigned / base * 100, 2) if base > 0 else 0.0

    ongoing_cost   = total_cost(ongoing)
    potential_cost = total_cost(potential)
    selected_cost  = total_cost(selected)

    return WorkloadStats(
        base_workload=base,
        ongoing_total=ongoing_total,
        potential_total=potential_total,
        selected_total=selected_total,
        total_assigned=total_assigned,
        coverage=coverage,
        remaining=max(0, base - total_assigned),
        status=classify_coverage(coverage),
        ongoing_cost=ongoing_cost,
        potential_cost=potential_cost,
        selected_cost=selected_cost,
        average_ongoing_rate=_average_rate(ongoing_cost, ongoing_total),
        average_potential_rate=_average_rate(potential_cost, potential_total),
        average_selected_rate=_average_rate(selected_cost, selected_total),
    )


def compute_teacher_stats(teacher: Any) -> TeacherStats:
    """Vue fiche teacher : charges par état + coût des selected."""
    ongoing   = _as_list(getattr(teacher, "ongoing", None))
    potential = _as_list(getattr(teacher, "potential", None))
    selected  = _as_list(getattr(teacher, "selected", None))

    ongoing_workload   = total_workload(ongoing)
    potential_workload = total_workload(potential)
    selected_workload  = total_workload(selected)

    return TeacherStats(
        total_relations=len(ongoing) + len(potential) + len(selected),
        total_workload=ongoing_workload + potential_workload + selected_workload,
        ongoing_workload=ongoing_workload,
        potential_workload=potential_workload,
        selected_workload=selected_workload,
        selected_cost=total_cost(selected, teacher=teacher),
    )
