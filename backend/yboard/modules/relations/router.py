# modules/relations/router.py
"""
Endpoints relations.

    POST   /relations/transition                      → glisser-déposer
    POST   /relations/move                            → déplacement atomique
    GET    /relations/transitions                     → matrice des règles
    POST   /relations/{state}                         → création
    GET    /relations/{state}/{teacher_id}/{pm_id}    → lecture
    PATCH  /relations/{state}/{teacher_id}/{pm_id}    → mise à jour partielle
    DELETE /relations/{state}/{teacher_id}/{pm_id}    → suppression

Les routes fixes sont déclarées avant /{state}.
"""
from fastapi import APIRouter, Depends, status
from typing import List

from yboard.modules.relations.service import RelationService, INTERVIEW_FIELDS
from yboard.modules.relations.schemas import (
    RelationCreateIn,
    RelationUpdateIn,
    TransitionIn,
    TransitionOut,
    TransitionRuleOut,
    RelationDeletedOut,
)
from yboard.shared.enums import RelationState
from yboard.shared.schemas import RelationOut
from yboard.shared.deps import DbDep, get_current_user
from yboard.shared.errors import YBoardError, to_http

router = APIRouter(prefix="/relations", tags=["Relations"], dependencies=[Depends(get_current_user)])
service = RelationService()


# ─────────────────────────────────────────────
# TRANSITIONS
# ─────────────────────────────────────────────

@router.get("/transitions", response_model=List[TransitionRuleOut])
async def list_transition_rules():
    return service.rules()


@router.post("/transition", response_model=TransitionOut)
async def transition(payload: TransitionIn, db: DbDep):
    """
    ongoing → potential/selected : copie.
    potential ↔ selected         : déplacement.
    * → ongoing                  : refusé (400 TRANSITION_FORBIDDEN).
    """
    try:
        return await service.transition(
            db, payload.teacher_id, payload.promo_module_id, payload.source, payload.target,
        )
    except YBoardError as e:
        raise to_http(e)


@router.post("/move", response_model=TransitionOut)
async def move(payload: TransitionIn, db: DbDep):
    try:
        relation = await service.move(
            db, payload.teacher_id, payload.promo_module_id, payload.source, payload.target,
        )
        stats = await service.fresh_stats(db, payload.promo_module_id)
    except YBoardError as e:
        raise to_http(e)
    return {
        "kind": "move",
        "source": payload.source,
        "target": payload.target,
        "relation": relation,
        "stats": stats,
    }


# ─────────────────────────────────────────────
# FAÇADE PAR ÉTAT
# ─────────────────────────────────────────────

@router.post("/{state}", response_model=RelationOut, status_code=status.HTTP_201_CREATED)
async def create_relation(state: RelationState, payload: RelationCreateIn, db: DbDep):
    state_fields = payload.model_dump(exclude_unset=True, include=set(INTERVIEW_FIELDS))
    try:
        return await service.create(
            db, state, payload.teacher_id, payload.promo_module_id,
            payload.workload, payload.rate, **state_fields,
        )
    except YBoardError as e:
        raise to_http(e)


@router.get("/{state}/{teacher_id}/{promo_module_id}", response_model=RelationOut)
async def get_relation(state: RelationState, teacher_id: int, promo_module_id: int, db: DbDep):
    try:
        return await service.get(db, state, teacher_id, promo_module_id)
    except YBoardError as e:
        raise to_http(e)


@router.patch("/{state}/{teacher_id}/{promo_module_id}", response_model=RelationOut)
async def update_relation(
    state: RelationState, teacher_id: int, promo_module_id: int,
    payload: RelationUpdateIn, db: DbDep,
):
    try:
        return await service.update(
            db, state, teacher_id, promo_module_id, **payload.model_dump(exclude_unset=True),
        )
    except YBoardError as e:
        raise to_http(e)


@router.delete("/{state}/{teacher_id}/{promo_module_id}", response_model=RelationDeletedOut)
async def delete_relation(state: RelationState, teacher_id: int, promo_module_id: int, db: DbDep):
    try:
        await service.delete(db, state, teacher_id, promo_module_id)
    except YBoardError as e:
        raise to_http(e)
    return {"success": True}
