# yboard/modules/promo_modules/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List

from yboard.shared.schemas import PromoRefOut, ModuleRefOut, RelationWithTeacherOut


class PromoModuleCreateIn(BaseModel):
    promo_id:  int
    module_id: int
    workload:  int = Field(..., gt=0)


class PromoModuleUpdateIn(BaseModel):
    workload: Optional[int] = Field(None, gt=0)

    @field_validator("workload")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("La charge ne peut pas être nulle.")
        return v


class PromoModuleOut(BaseModel):
    id: int
    promo_id: int
    module_id: int
    workload: int
    model_config = ConfigDict(from_attributes=True)


class PromoModuleDetailOut(PromoModuleOut):
    """Ligne du tableau cartésien : promo, module et relations par état."""
    promo: Optional[PromoRefOut] = None
    module: Optional[ModuleRefOut] = None
    ongoing: List[RelationWithTeacherOut] = []
    potential: List[RelationWithTeacherOut] = []
    selected: List[RelationWithTeacherOut] = []


class PromoModuleDeletedOut(BaseModel):
    success: bool = True
    relations_count: int
