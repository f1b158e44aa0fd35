# modules/overview/router.py
from fastapi import APIRouter, Depends

from yboard.modules.overview.service import OverviewService
from yboard.modules.overview.schemas import OverviewOut, SelectionIn, SelectionOut
from yboard.shared.deps import DbDep, PreferenceDep, get_current_user

router = APIRouter(prefix="/overview", tags=["Overview"], dependencies=[Depends(get_current_user)])
service = OverviewService()


@router.get("/", response_model=OverviewOut)
async def overview(db: DbDep, store: PreferenceDep):
    return await service.build(db, store)


@router.get("/selection", response_model=SelectionOut)
async def get_selection(store: PreferenceDep):
    return {"promos": await service.get_selection(store)}


@router.put("/selection", response_model=SelectionOut)
async def set_selection(payload: SelectionIn, store: PreferenceDep):
    return {"promos": await service.set_selection(store, payload.promos)}
