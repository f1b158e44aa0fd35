# yboard/modules/overview/schemas.py
from pydantic import BaseModel
from typing import List

from yboard.modules.promo_modules.schemas import PromoModuleDetailOut
from yboard.shared.schemas import WorkloadStatsOut


class OverviewRowOut(BaseModel):
    promo_module: PromoModuleDetailOut
    stats: WorkloadStatsOut


class OverviewGroupOut(BaseModel):
    promo: str                 # "<level> <specialty>"
    rows: List[OverviewRowOut]


class OverviewOut(BaseModel):
    known_promos: List[str]
    visible_promos: List[str]
    groups: List[OverviewGroupOut]


class SelectionIn(BaseModel):
    promos: List[str]


class SelectionOut(BaseModel):
    """Sélection vide = toutes les promos affichées."""
    promos: List[str]
