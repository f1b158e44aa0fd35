# modules/promos/router.py
"""
Endpoints promos (cohortes).

Règle : zéro logique métier ici. Tout passe par PromoService.
"""
from fastapi import APIRouter, Depends, status
from typing import List

from yboard.modules.promos.service import PromoService
from yboard.modules.promos.schemas import (
    PromoCreateIn,
    PromoUpdateIn,
    PromoOut,
    PromoDetailOut,
    PromoDeletedOut,
)
from yboard.shared.schemas import CountOut
from yboard.shared.deps import DbDep, get_current_user
from yboard.shared.errors import YBoardError, to_http

router = APIRouter(prefix="/promos", tags=["Promos"], dependencies=[Depends(get_current_user)])
service = PromoService()


@router.get("/", response_model=List[PromoDetailOut])
async def list_promos(db: DbDep):
    return await service.list_all(db)


@router.get("/count", response_model=CountOut)
async def count_promos(db: DbDep):
    return {"count": await service.count(db)}


@router.get("/{promo_id}", response_model=PromoDetailOut)
async def get_promo(promo_id: int, db: DbDep):
    try:
        return await service.get(db, promo_id)
    except YBoardError as e:
        raise to_http(e)


@router.post("/", response_model=PromoOut, status_code=status.HTTP_201_CREATED)
async def create_promo(payload: PromoCreateIn, db: DbDep):
    return await service.create(db, payload)


@router.patch("/{promo_id}", response_model=PromoOut)
async def update_promo(promo_id: int, payload: PromoUpdateIn, db: DbDep):
    try:
        return await service.update(db, promo_id, payload)
    except YBoardError as e:
        raise to_http(e)


@router.delete("/{promo_id}", response_model=PromoDeletedOut)
async def delete_promo(promo_id: int, db: DbDep):
    """Supprime la promo avec ses PromoModules et relations."""
    try:
        return await service.delete(db, promo_id)
    except YBoardError as e:
        raise to_http(e)
