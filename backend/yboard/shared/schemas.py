# yboard/shared/schemas.py
"""
Schemas de référence partagés entre modules (vues imbriquées).

Chaque module expose ses propres *In / *Out ; ceux d'ici ne servent
qu'à imbriquer une entité dans la réponse d'une autre sans import croisé
entre modules.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

from yboard.shared.enums import PromoLevel, RelationState, WorkloadStatus


class PromoRefOut(BaseModel):
    id: int
    level: PromoLevel
    specialty: str
    model_config = ConfigDict(from_attributes=True)


class ModuleRefOut(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)


class PromoModuleRefOut(BaseModel):
    id: int
    promo_id: int
    module_id: int
    workload: int
    promo: Optional[PromoRefOut] = None
    module: Optional[ModuleRefOut] = None
    model_config = ConfigDict(from_attributes=True)


class TeacherRefOut(BaseModel):
    id: int
    firstname: str
    lastname: str
    status: Optional[str] = None
    rate: Optional[float] = None
    model_config = ConfigDict(from_attributes=True)


class RelationOut(BaseModel):
    teacher_id: int
    promo_module_id: int
    state: RelationState
    workload: int
    rate: Optional[float] = None
    interview_date: Optional[datetime] = None
    interview_comments: Optional[str] = None
    decision: Optional[bool] = None
    model_config = ConfigDict(from_attributes=True)


class RelationWithTeacherOut(RelationOut):
    teacher: Optional[TeacherRefOut] = None


class RelationWithPromoModuleOut(RelationOut):
    promo_module: Optional[PromoModuleRefOut] = None


class CountOut(BaseModel):
    count: int


class WorkloadStatsOut(BaseModel):
    """Miroir de engine.workload.stats.WorkloadStats."""
    base_workload: int
    ongoing_total: int
    potential_total: int
    selected_total: int
    total_assigned: int
    coverage: float
    remaining: int
    status: WorkloadStatus
    ongoing_cost: float
    potential_cost: float
    selected_cost: float
    average_ongoing_rate: float
    average_potential_rate: float
    average_selected_rate: float
    model_config = ConfigDict(from_attributes=True)
