# modules/promo_modules/repository.py
"""
Accès DB pour les PromoModules (Module × Promo + charge requise).

Les lectures servant au calcul de stats passent par populate_existing :
une relation venant d'être déplacée ne doit jamais être lue depuis
l'identity map de la session.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload
from typing import List, Optional

from yboard.shared.models import Promo, Module, PromoModule, Relation


def _with_relations():
    return (
        selectinload(PromoModule.promo),
        selectinload(PromoModule.module),
        selectinload(PromoModule.relations).selectinload(Relation.teacher),
    )


class PromoModuleRepository:

    async def list_all(self, db: AsyncSession) -> List[PromoModule]:
        r = await db.execute(
            select(PromoModule)
            .options(selectinload(PromoModule.promo), selectinload(PromoModule.module))
            .order_by(PromoModule.id)
        )
        return r.scalars().all()

    async def cartesian(self, db: AsyncSession) -> List[PromoModule]:
        """Toutes les lignes, triées niveau → spécialité → nom du module."""
        r = await db.execute(
            select(PromoModule)
            .join(PromoModule.promo)
            .join(PromoModule.module)
            .options(*_with_relations())
            .order_by(Promo.level, Promo.specialty, Module.name)
            .execution_options(populate_existing=True)
        )
        return r.scalars().all()

    async def get_by_id(self, db: AsyncSession, promo_module_id: int) -> Optional[PromoModule]:
        r = await db.execute(select(PromoModule).where(PromoModule.id == promo_module_id))
        return r.scalar_one_or_none()

    async def get_with_relations(self, db: AsyncSession, promo_module_id: int) -> Optional[PromoModule]:
        r = await db.execute(
            select(PromoModule)
            .where(PromoModule.id == promo_module_id)
            .options(*_with_relations())
            .execution_options(populate_existing=True)
        )
        return r.scalar_one_or_none()

    async def create(self, db: AsyncSession, payload) -> Optional[PromoModule]:
        """None si le couple (promo, module) existe déjà."""
        db_obj = PromoModule(**payload.model_dump())
        db.add(db_obj)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            return None
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, promo_module: PromoModule, payload) -> PromoModule:
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(promo_module, field, value)
        await db.commit()
        await db.refresh(promo_module)
        return promo_module

    async def count_relations(self, db: AsyncSession, promo_module_id: int) -> int:
        r = await db.execute(
            select(func.count()).select_from(Relation)
            .where(Relation.promo_module_id == promo_module_id)
        )
        return r.scalar_one()

    async def delete(self, db: AsyncSession, promo_module: PromoModule) -> None:
        await db.delete(promo_module)
        await db.commit()
