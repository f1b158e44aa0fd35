# modules/teachers/router.py
"""
Endpoints intervenants : CRUD, statistiques, référence CV.

Règle : zéro logique métier ici. Tout passe par TeacherService.
"""
from fastapi import APIRouter, Depends, status
from typing import List

from yboard.modules.teachers.service import TeacherService
from yboard.modules.teachers.schemas import (
    TeacherCreateIn,
    TeacherUpdateIn,
    TeacherOut,
    TeacherDetailOut,
    TeacherStatsOut,
    TeacherDeletedOut,
    TeacherCvIn,
    TeacherCvDeletedOut,
)
from yboard.shared.schemas import CountOut
from yboard.shared.deps import DbDep, get_current_user
from yboard.shared.errors import YBoardError, to_http

router = APIRouter(prefix="/teachers", tags=["Teachers"], dependencies=[Depends(get_current_user)])
service = TeacherService()


# ─────────────────────────────────────────────
# LECTURE
# ─────────────────────────────────────────────

@router.get("/", response_model=List[TeacherDetailOut], summary="Tous les intervenants avec relations")
async def list_teachers(db: DbDep):
    return await service.list_all(db)


@router.get("/count", response_model=CountOut)
async def count_teachers(db: DbDep):
    return {"count": await service.count(db)}


@router.get("/{teacher_id}", response_model=TeacherDetailOut)
async def get_teacher(teacher_id: int, db: DbDep):
    try:
        return await service.get(db, teacher_id)
    except YBoardError as e:
        raise to_http(e)


@router.get("/{teacher_id}/statistics", response_model=TeacherStatsOut)
async def get_teacher_statistics(teacher_id: int, db: DbDep):
    """Charges par état + coût des relations selected."""
    try:
        return await service.statistics(db, teacher_id)
    except YBoardError as e:
        raise to_http(e)


# ─────────────────────────────────────────────
# ÉCRITURE
# ─────────────────────────────────────────────

@router.post("/", response_model=TeacherOut, status_code=status.HTTP_201_CREATED)
async def create_teacher(payload: TeacherCreateIn, db: DbDep):
    return await service.create(db, payload)


@router.patch("/{teacher_id}", response_model=TeacherOut)
async def update_teacher(teacher_id: int, payload: TeacherUpdateIn, db: DbDep):
    try:
        return await service.update(db, teacher_id, payload)
    except YBoardError as e:
        raise to_http(e)


@router.delete("/{teacher_id}", response_model=TeacherDeletedOut)
async def delete_teacher(teacher_id: int, db: DbDep):
    """Supprime l'intervenant et toutes ses relations (cascade)."""
    try:
        return await service.delete(db, teacher_id)
    except YBoardError as e:
        raise to_http(e)


# ─────────────────────────────────────────────
# RÉFÉRENCE CV
# ─────────────────────────────────────────────

@router.put("/{teacher_id}/cv", response_model=TeacherOut, summary="Associer un CV déjà stocké")
async def attach_cv(teacher_id: int, payload: TeacherCvIn, db: DbDep):
    try:
        return await service.attach_cv(db, teacher_id, payload.filename)
    except YBoardError as e:
        raise to_http(e)


@router.delete("/{teacher_id}/cv", response_model=TeacherCvDeletedOut, summary="Dissocier le CV")
async def detach_cv(teacher_id: int, db: DbDep):
    try:
        filename = await service.detach_cv(db, teacher_id)
    except YBoardError as e:
        raise to_http(e)
    return {"success": True, "deleted_filename": filename}
