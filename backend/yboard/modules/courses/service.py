# modules/courses/service.py
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Dict

from yboard.core.logging import get_logger
from yboard.modules.courses.repository import ModuleRepository
from yboard.modules.promos.repository import PromoRepository
from yboard.shared.errors import NotFound
from yboard.shared.models import Module

logger = get_logger(__name__)

repo = ModuleRepository()
promo_repo = PromoRepository()


class ModuleService:

    async def list_all(self, db: AsyncSession) -> List[Module]:
        return await repo.list_all(db)

    async def list_by_promo(self, db: AsyncSession, promo_id: int) -> List[Module]:
        """Modules enseignés dans une promo donnée, triés par nom."""
        modules = await repo.list_all(db)
        return [m for m in modules if any(pm.promo_id == promo_id for pm in m.promo_modules)]

    async def count(self, db: AsyncSession) -> int:
        return await repo.count(db)

    async def get(self, db: AsyncSession, module_id: int) -> Module:
        module = await repo.get_by_id(db, module_id)
        if not module:
            raise NotFound("Module introuvable.", module_id=module_id)
        return module

    async def create(self, db: AsyncSession, payload) -> Module:
        if payload.promo_id is not None:
            if not await promo_repo.get_by_id(db, payload.promo_id):
                raise NotFound("Promo introuvable.", promo_id=payload.promo_id)
        module = await repo.create(db, payload.name, payload.promo_id, payload.workload)
        logger.info("module_created", module_id=module.id, promo_id=payload.promo_id)
        return module

    async def rename(self, db: AsyncSession, module_id: int, name: str) -> Module:
        module = await self.get(db, module_id)
        return await repo.rename(db, module, name)

    async def delete(self, db: AsyncSession, module_id: int) -> Dict:
        module = await repo.get_with_relations(db, module_id)
        if not module:
            raise NotFound("Module introuvable.", module_id=module_id)

        promo_modules_count = len(module.promo_modules)
        relations_count = sum(len(pm.relations) for pm in module.promo_modules)
        name = module.name

        await repo.delete(db, module)
        logger.info(
            "module_deleted", module_id=module_id,
            promo_modules_count=promo_modules_count, relations_count=relations_count,
        )
        return {
            "success": True,
            "module": name,
            "promo_modules_count": promo_modules_count,
            "relations_count": relations_count,
        }
