# modules/courses/router.py
"""
Endpoints modules (cours).
"""
from fastapi import APIRouter, Depends, status
from typing import List

from yboard.modules.courses.service import ModuleService
from yboard.modules.courses.schemas import (
    ModuleCreateIn,
    ModuleUpdateIn,
    ModuleOut,
    ModuleDetailOut,
    ModuleDeletedOut,
)
from yboard.shared.schemas import CountOut
from yboard.shared.deps import DbDep, get_current_user
from yboard.shared.errors import YBoardError, to_http

router = APIRouter(prefix="/modules", tags=["Modules"], dependencies=[Depends(get_current_user)])
service = ModuleService()


@router.get("/", response_model=List[ModuleDetailOut])
async def list_modules(db: DbDep):
    return await service.list_all(db)


@router.get("/count", response_model=CountOut)
async def count_modules(db: DbDep):
    return {"count": await service.count(db)}


@router.get("/by-promo/{promo_id}", response_model=List[ModuleDetailOut])
async def list_modules_by_promo(promo_id: int, db: DbDep):
    return await service.list_by_promo(db, promo_id)


@router.get("/{module_id}", response_model=ModuleDetailOut)
async def get_module(module_id: int, db: DbDep):
    try:
        return await service.get(db, module_id)
    except YBoardError as e:
        raise to_http(e)


@router.post("/", response_model=ModuleOut, status_code=status.HTTP_201_CREATED)
async def create_module(payload: ModuleCreateIn, db: DbDep):
    """Crée le module et, si promo_id + workload sont fournis, le PromoModule associé."""
    try:
        return await service.create(db, payload)
    except YBoardError as e:
        raise to_http(e)


@router.patch("/{module_id}", response_model=ModuleOut)
async def rename_module(module_id: int, payload: ModuleUpdateIn, db: DbDep):
    try:
        return await service.rename(db, module_id, payload.name)
    except YBoardError as e:
        raise to_http(e)


@router.delete("/{module_id}", response_model=ModuleDeletedOut)
async def delete_module(module_id: int, db: DbDep):
    try:
        return await service.delete(db, module_id)
    except YBoardError as e:
        raise to_http(e)
