# modules/promos/repository.py
"""
Accès DB pour les promos.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload
from typing import List, Optional

from yboard.shared.models import Promo, PromoModule


class PromoRepository:

    async def list_all(self, db: AsyncSession) -> List[Promo]:
        r = await db.execute(
            select(Promo)
            .options(selectinload(Promo.promo_modules).selectinload(PromoModule.module))
            .order_by(Promo.level, Promo.specialty)
        )
        return r.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        r = await db.execute(select(func.count(Promo.id)))
        return r.scalar_one()

    async def get_by_id(self, db: AsyncSession, promo_id: int) -> Optional[Promo]:
        r = await db.execute(
            select(Promo)
            .where(Promo.id == promo_id)
            .options(selectinload(Promo.promo_modules).selectinload(PromoModule.module))
        )
        return r.scalar_one_or_none()

    async def get_with_relations(self, db: AsyncSession, promo_id: int) -> Optional[Promo]:
        r = await db.execute(
            select(Promo)
            .where(Promo.id == promo_id)
            .options(selectinload(Promo.promo_modules).selectinload(PromoModule.relations))
            .execution_options(populate_existing=True)
        )
        return r.scalar_one_or_none()

    async def create(self, db: AsyncSession, payload) -> Promo:
        db_obj = Promo(**payload.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, promo: Promo, payload) -> Promo:
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(promo, field, value)
        await db.commit()
        await db.refresh(promo)
        return promo

    async def delete(self, db: AsyncSession, promo: Promo) -> None:
        # Cascade ORM + FK : promo_modules puis relations, même transaction
        await db.delete(promo)
        await db.commit()
