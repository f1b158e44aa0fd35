# yboard/modules/teachers/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime

from yboard.shared.enums import TeacherStatus
from yboard.shared.schemas import RelationWithPromoModuleOut


# ── Teacher CRUD ───────────────────────────────────────────

class TeacherCreateIn(BaseModel):
    firstname: str = Field(..., min_length=1)
    lastname:  str = Field(..., min_length=1)
    status:    Optional[TeacherStatus] = None
    diploma:   Optional[str] = None
    comments:  Optional[str] = None
    rate:      Optional[float] = Field(None, ge=0, description="Taux horaire par défaut (€/h)")
    email_perso:  Optional[str] = None
    email_ynov:   Optional[str] = None
    phone_number: Optional[str] = None
    model_config = ConfigDict(use_enum_values=True)


class TeacherUpdateIn(BaseModel):
    firstname: Optional[str] = Field(None, min_length=1)
    lastname:  Optional[str] = Field(None, min_length=1)
    status:    Optional[TeacherStatus] = None
    diploma:   Optional[str] = None
    comments:  Optional[str] = None
    rate:      Optional[float] = Field(None, ge=0)
    email_perso:  Optional[str] = None
    email_ynov:   Optional[str] = None
    phone_number: Optional[str] = None
    model_config = ConfigDict(use_enum_values=True)

    @field_validator("firstname", "lastname")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Ce champ ne peut pas être nul.")
        return v


class TeacherOut(BaseModel):
    id: int
    firstname: str
    lastname: str
    status: Optional[str] = None
    diploma: Optional[str] = None
    comments: Optional[str] = None
    rate: Optional[float] = None
    email_perso: Optional[str] = None
    email_ynov: Optional[str] = None
    phone_number: Optional[str] = None
    cv_filename: Optional[str] = None
    cv_uploaded_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class TeacherDetailOut(TeacherOut):
    """Fiche complète : relations des trois états avec leur PromoModule."""
    ongoing:   List[RelationWithPromoModuleOut] = []
    potential: List[RelationWithPromoModuleOut] = []
    selected:  List[RelationWithPromoModuleOut] = []


class TeacherStatsOut(BaseModel):
    total_relations: int
    total_workload: int
    ongoing_workload: int
    potential_workload: int
    selected_workload: int
    selected_cost: float
    model_config = ConfigDict(from_attributes=True)


class TeacherDeletedOut(BaseModel):
    success: bool = True
    teacher: str           # "Lastname Firstname"
    relations_count: int


# ── CV ─────────────────────────────────────────────────────

class TeacherCvIn(BaseModel):
    filename: str = Field(..., min_length=1)


class TeacherCvDeletedOut(BaseModel):
    success: bool = True
    deleted_filename: str
