# modules/promo_modules/router.py
"""
Endpoints PromoModule : rattachement module ↔ promo, stats de charge,
vue cartésienne.
"""
from fastapi import APIRouter, Depends, status
from typing import List

from yboard.modules.promo_modules.service import PromoModuleService
from yboard.modules.promo_modules.schemas import (
    PromoModuleCreateIn,
    PromoModuleUpdateIn,
    PromoModuleOut,
    PromoModuleDetailOut,
    PromoModuleDeletedOut,
)
from yboard.shared.schemas import WorkloadStatsOut
from yboard.shared.deps import DbDep, get_current_user
from yboard.shared.errors import YBoardError, to_http

router = APIRouter(prefix="/promo-modules", tags=["PromoModules"], dependencies=[Depends(get_current_user)])
service = PromoModuleService()


@router.get("/", response_model=List[PromoModuleOut])
async def list_promo_modules(db: DbDep):
    return await service.list_all(db)


@router.get("/cartesian", response_model=List[PromoModuleDetailOut], summary="Toutes les lignes promo × module")
async def cartesian(db: DbDep):
    return await service.cartesian(db)


@router.get("/{promo_module_id}", response_model=PromoModuleDetailOut)
async def get_promo_module(promo_module_id: int, db: DbDep):
    try:
        return await service.get(db, promo_module_id)
    except YBoardError as e:
        raise to_http(e)


@router.get("/{promo_module_id}/stats", response_model=WorkloadStatsOut)
async def get_promo_module_stats(promo_module_id: int, db: DbDep):
    """Couverture, reste à pourvoir et coûts (seuls les selected comptent)."""
    try:
        return await service.stats(db, promo_module_id)
    except YBoardError as e:
        raise to_http(e)


@router.post("/", response_model=PromoModuleOut, status_code=status.HTTP_201_CREATED)
async def create_promo_module(payload: PromoModuleCreateIn, db: DbDep):
    try:
        return await service.create(db, payload)
    except YBoardError as e:
        raise to_http(e)


@router.patch("/{promo_module_id}", response_model=PromoModuleOut)
async def update_promo_module(promo_module_id: int, payload: PromoModuleUpdateIn, db: DbDep):
    try:
        return await service.update(db, promo_module_id, payload)
    except YBoardError as e:
        raise to_http(e)


@router.delete("/{promo_module_id}", response_model=PromoModuleDeletedOut)
async def delete_promo_module(promo_module_id: int, db: DbDep):
    try:
        return await service.delete(db, promo_module_id)
    except YBoardError as e:
        raise to_http(e)
