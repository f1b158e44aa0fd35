# modules/teachers/repository.py
"""
Accès DB pour les intervenants.

Les vues "avec relations" chargent en eager (selectinload) :
relation → promo_module → promo / module. Jamais de lazy-load en async.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload
from typing import List, Optional
from datetime import datetime

from yboard.shared.models import Teacher, Relation, PromoModule


def _with_relations():
    return (
        selectinload(Teacher.relations)
        .selectinload(Relation.promo_module)
        .options(selectinload(PromoModule.promo), selectinload(PromoModule.module))
    )


class TeacherRepository:

    async def list_all(self, db: AsyncSession) -> List[Teacher]:
        r = await db.execute(
            select(Teacher)
            .options(_with_relations())
            .order_by(Teacher.lastname, Teacher.firstname)
        )
        return r.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        r = await db.execute(select(func.count(Teacher.id)))
        return r.scalar_one()

    async def get_by_id(self, db: AsyncSession, teacher_id: int) -> Optional[Teacher]:
        r = await db.execute(select(Teacher).where(Teacher.id == teacher_id))
        return r.scalar_one_or_none()

    async def get_with_relations(self, db: AsyncSession, teacher_id: int) -> Optional[Teacher]:
        r = await db.execute(
            select(Teacher)
            .where(Teacher.id == teacher_id)
            .options(_with_relations())
            .execution_options(populate_existing=True)
        )
        return r.scalar_one_or_none()

    async def create(self, db: AsyncSession, payload) -> Teacher:
        db_obj = Teacher(**payload.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, teacher: Teacher, payload) -> Teacher:
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(teacher, field, value)
        await db.commit()
        await db.refresh(teacher)
        return teacher

    async def delete(self, db: AsyncSession, teacher: Teacher) -> None:
        await db.delete(teacher)
        await db.commit()

    async def set_cv(
        self, db: AsyncSession, teacher: Teacher,
        filename: Optional[str], uploaded_at: Optional[datetime],
    ) -> Teacher:
        teacher.cv_filename = filename
        teacher.cv_uploaded_at = uploaded_at
        await db.commit()
        await db.refresh(teacher)
        return teacher
