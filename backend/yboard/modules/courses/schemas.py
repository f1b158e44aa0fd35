# yboard/modules/courses/schemas.py
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, List

from yboard.shared.schemas import PromoRefOut


class ModuleCreateIn(BaseModel):
    """
    Création d'un module, éventuellement rattaché d'emblée à une promo.
    promo_id et workload vont ensemble.
    """
    name:     str = Field(..., min_length=1)
    promo_id: Optional[int] = None
    workload: Optional[int] = Field(None, gt=0)

    @model_validator(mode="after")
    def promo_and_workload_together(self):
        if (self.promo_id is None) != (self.workload is None):
            raise ValueError("promo_id et workload doivent être fournis ensemble.")
        return self


class ModuleUpdateIn(BaseModel):
    name: str = Field(..., min_length=1)


class ModulePromoLinkOut(BaseModel):
    id: int
    promo_id: int
    workload: int
    promo: Optional[PromoRefOut] = None
    model_config = ConfigDict(from_attributes=True)


class ModuleOut(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)


class ModuleDetailOut(ModuleOut):
    promo_modules: List[ModulePromoLinkOut] = []


class ModuleDeletedOut(BaseModel):
    success: bool = True
    module: str
    promo_modules_count: int
    relations_count: int
