# yboard/modules/promos/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List

from yboard.shared.enums import PromoLevel
from yboard.shared.schemas import PromoModuleRefOut


class PromoCreateIn(BaseModel):
    level:     PromoLevel
    specialty: str = Field(..., min_length=1)


class PromoUpdateIn(BaseModel):
    level:     Optional[PromoLevel] = None
    specialty: Optional[str] = Field(None, min_length=1)

    @field_validator("level", "specialty")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Ce champ ne peut pas être nul.")
        return v


class PromoOut(BaseModel):
    id: int
    level: PromoLevel
    specialty: str
    label: str                 # "<level> <specialty>"
    model_config = ConfigDict(from_attributes=True)


class PromoDetailOut(PromoOut):
    promo_modules: List[PromoModuleRefOut] = []


class PromoDeletedOut(BaseModel):
    success: bool = True
    promo: str                 # "B3 - Informatique"
    promo_modules_count: int
    relations_count: int
