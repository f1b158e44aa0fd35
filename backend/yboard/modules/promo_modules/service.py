# modules/promo_modules/service.py
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Dict

from yboard.core.logging import get_logger
from yboard.engine.workload.stats import compute_stats, WorkloadStats
from yboard.modules.promo_modules.repository import PromoModuleRepository
from yboard.modules.promos.repository import PromoRepository
from yboard.modules.courses.repository import ModuleRepository
from yboard.shared.errors import Conflict, NotFound
from yboard.shared.models import PromoModule

logger = get_logger(__name__)

repo = PromoModuleRepository()
promo_repo = PromoRepository()
module_repo = ModuleRepository()


class PromoModuleService:

    async def list_all(self, db: AsyncSession) -> List[PromoModule]:
        return await repo.list_all(db)

    async def cartesian(self, db: AsyncSession) -> List[PromoModule]:
        return await repo.cartesian(db)

    async def get(self, db: AsyncSession, promo_module_id: int) -> PromoModule:
        promo_module = await repo.get_with_relations(db, promo_module_id)
        if not promo_module:
            raise NotFound("Module de promo introuvable.", promo_module_id=promo_module_id)
        return promo_module

    async def stats(self, db: AsyncSession, promo_module_id: int) -> WorkloadStats:
        """Relit le PromoModule à chaque appel : jamais de stats sur un état périmé."""
        return compute_stats(await self.get(db, promo_module_id))

    async def create(self, db: AsyncSession, payload) -> PromoModule:
        if not await promo_repo.get_by_id(db, payload.promo_id):
            raise NotFound("Promo introuvable.", promo_id=payload.promo_id)
        if not await module_repo.get_by_id(db, payload.module_id):
            raise NotFound("Module introuvable.", module_id=payload.module_id)

        promo_module = await repo.create(db, payload)
        if promo_module is None:
            logger.warning("promo_module_conflict", promo_id=payload.promo_id, module_id=payload.module_id)
            raise Conflict(
                "Ce module est déjà rattaché à cette promo.",
                promo_id=payload.promo_id, module_id=payload.module_id,
            )
        return promo_module

    async def update(self, db: AsyncSession, promo_module_id: int, payload) -> PromoModule:
        promo_module = await repo.get_by_id(db, promo_module_id)
        if not promo_module:
            raise NotFound("Module de promo introuvable.", promo_module_id=promo_module_id)
        return await repo.update(db, promo_module, payload)

    async def delete(self, db: AsyncSession, promo_module_id: int) -> Dict:
        promo_module = await repo.get_by_id(db, promo_module_id)
        if not promo_module:
            raise NotFound("Module de promo introuvable.", promo_module_id=promo_module_id)
        relations_count = await repo.count_relations(db, promo_module_id)
        await repo.delete(db, promo_module)
        logger.info("promo_module_deleted", promo_module_id=promo_module_id, relations_count=relations_count)
        return {"success": True, "relations_count": relations_count}
