# yboard/modules/relations/schemas.py
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from typing import Optional
from datetime import datetime

from yboard.shared.enums import RelationState, TransitionKind
from yboard.shared.schemas import RelationOut, WorkloadStatsOut


class RelationCreateIn(BaseModel):
    teacher_id:      int
    promo_module_id: int
    workload:        StrictInt = Field(..., gt=0)
    rate:            Optional[float] = Field(None, ge=0)
    # Potential uniquement
    interview_date:     Optional[datetime] = None
    interview_comments: Optional[str] = None
    decision:           Optional[bool] = None


class RelationUpdateIn(BaseModel):
    """La clé (teacher, promo_module, état) ne se modifie pas : champs en plus refusés."""
    workload:           Optional[StrictInt] = Field(None, gt=0)
    rate:               Optional[float] = Field(None, ge=0)
    interview_date:     Optional[datetime] = None
    interview_comments: Optional[str] = None
    decision:           Optional[bool] = None
    model_config = ConfigDict(extra="forbid")

    @field_validator("workload")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("La charge ne peut pas être nulle.")
        return v


class TransitionIn(BaseModel):
    """Glisser-déposer d'une relation d'un état vers un autre."""
    teacher_id:      int
    promo_module_id: int
    source:          RelationState
    target:          RelationState


class TransitionOut(BaseModel):
    kind:     TransitionKind
    source:   RelationState
    target:   RelationState
    relation: Optional[RelationOut] = None
    stats:    WorkloadStatsOut


class TransitionRuleOut(BaseModel):
    source: RelationState
    target: RelationState
    result: str            # "noop" | "duplicate" | "move" | "forbidden"


class RelationDeletedOut(BaseModel):
    success: bool = True

