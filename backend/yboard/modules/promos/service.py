# modules/promos/service.py
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Dict

from yboard.core.logging import get_logger
from yboard.modules.promos.repository import PromoRepository
from yboard.shared.errors import NotFound
from yboard.shared.models import Promo

logger = get_logger(__name__)

repo = PromoRepository()


class PromoService:

    async def list_all(self, db: AsyncSession) -> List[Promo]:
        return await repo.list_all(db)

    async def count(self, db: AsyncSession) -> int:
        return await repo.count(db)

    async def get(self, db: AsyncSession, promo_id: int) -> Promo:
        promo = await repo.get_by_id(db, promo_id)
        if not promo:
            raise NotFound("Promo introuvable.", promo_id=promo_id)
        return promo

    async def create(self, db: AsyncSession, payload) -> Promo:
        return await repo.create(db, payload)

    async def update(self, db: AsyncSession, promo_id: int, payload) -> Promo:
        promo = await self.get(db, promo_id)
        return await repo.update(db, promo, payload)

    async def delete(self, db: AsyncSession, promo_id: int) -> Dict:
        """
        Supprime la promo, ses PromoModules et toutes leurs relations.
        Renvoie le décompte pour la confirmation côté front.
        """
        promo = await repo.get_with_relations(db, promo_id)
        if not promo:
            raise NotFound("Promo introuvable.", promo_id=promo_id)

        promo_modules_count = len(promo.promo_modules)
        relations_count = sum(len(pm.relations) for pm in promo.promo_modules)
        label = promo.label.replace(" ", " - ", 1)

        await repo.delete(db, promo)
        logger.info(
            "promo_deleted", promo_id=promo_id,
            promo_modules_count=promo_modules_count, relations_count=relations_count,
        )
        return {
            "success": True,
            "promo": label,
            "promo_modules_count": promo_modules_count,
            "relations_count": relations_count,
        }
