# modules/courses/repository.py
"""
Accès DB pour les modules (cours).
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload
from typing import List, Optional

from yboard.shared.models import Module, PromoModule


class ModuleRepository:

    async def list_all(self, db: AsyncSession) -> List[Module]:
        r = await db.execute(
            select(Module)
            .options(selectinload(Module.promo_modules).selectinload(PromoModule.promo))
            .order_by(Module.name)
        )
        return r.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        r = await db.execute(select(func.count(Module.id)))
        return r.scalar_one()

    async def get_by_id(self, db: AsyncSession, module_id: int) -> Optional[Module]:
        r = await db.execute(
            select(Module)
            .where(Module.id == module_id)
            .options(selectinload(Module.promo_modules).selectinload(PromoModule.promo))
        )
        return r.scalar_one_or_none()

    async def get_with_relations(self, db: AsyncSession, module_id: int) -> Optional[Module]:
        r = await db.execute(
            select(Module)
            .where(Module.id == module_id)
            .options(selectinload(Module.promo_modules).selectinload(PromoModule.relations))
            .execution_options(populate_existing=True)
        )
        return r.scalar_one_or_none()

    async def create(
        self, db: AsyncSession, name: str,
        promo_id: Optional[int] = None, workload: Optional[int] = None,
    ) -> Module:
        db_obj = Module(name=name)
        db.add(db_obj)
        if promo_id is not None and workload is not None:
            await db.flush()   # db_obj.id disponible
            db.add(PromoModule(module_id=db_obj.id, promo_id=promo_id, workload=workload))
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def rename(self, db: AsyncSession, module: Module, name: str) -> Module:
        module.name = name
        await db.commit()
        await db.refresh(module)
        return module

    async def delete(self, db: AsyncSession, module: Module) -> None:
        await db.delete(module)
        await db.commit()
