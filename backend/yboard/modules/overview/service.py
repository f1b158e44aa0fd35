# modules/overview/service.py
"""
Vue d'ensemble : lignes promo × module groupées par promo, chacune avec
ses stats de charge, filtrées par la sélection de l'utilisateur.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict, Iterable, List

from yboard.engine.grouping.promos import group_by_promo
from yboard.engine.grouping.selection import (
    load_selected_promos,
    save_selected_promos,
    resolve_visible_promos,
)
from yboard.engine.workload.stats import compute_stats
from yboard.infra.preferences import PreferenceStore
from yboard.modules.promo_modules.repository import PromoModuleRepository

promo_module_repo = PromoModuleRepository()


class OverviewService:

    async def build(self, db: AsyncSession, store: PreferenceStore) -> Dict:
        rows = [
            {
                "level": pm.promo.level,
                "specialty": pm.promo.specialty,
                "promo_module": pm,
                "stats": compute_stats(pm),
            }
            for pm in await promo_module_repo.cartesian(db)
        ]
        grouped = group_by_promo(rows)
        visible = resolve_visible_promos(await load_selected_promos(store), grouped.keys())

        return {
            "known_promos": list(grouped.keys()),
            "visible_promos": visible,
            "groups": [{"promo": key, "rows": grouped[key]} for key in visible],
        }

    async def get_selection(self, store: PreferenceStore) -> List[str]:
        return sorted(await load_selected_promos(store))

    async def set_selection(self, store: PreferenceStore, promos: Iterable[str]) -> List[str]:
        await save_selected_promos(store, promos)
        return await self.get_selection(store)
