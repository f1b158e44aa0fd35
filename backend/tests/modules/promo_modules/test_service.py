# tests/modules/promo_modules/test_service.py
"""
Tests unitaires pour modules.promo_modules.service.PromoModuleService

Couverture :
    create() : promo / module inconnus → NotFound ; couple existant → Conflict
    stats()  : relecture systématique puis compute_stats
    delete() : décompte des relations supprimées
"""
import pytest
from unittest.mock import AsyncMock

from yboard.modules.promo_modules import service as pm_service_module
from yboard.modules.promo_modules.service import PromoModuleService
from yboard.modules.promo_modules.schemas import PromoModuleCreateIn
from yboard.shared.enums import RelationState
from yboard.shared.errors import Conflict, NotFound
from tests.conftest import make_module, make_promo, make_promo_module, make_relation

pytestmark = pytest.mark.service

service = PromoModuleService()


@pytest.fixture
def repos(mocker):
    repo = mocker.patch.object(pm_service_module, "repo")
    promo_repo = mocker.patch.object(pm_service_module, "promo_repo")
    module_repo = mocker.patch.object(pm_service_module, "module_repo")
    promo_repo.get_by_id = AsyncMock(return_value=make_promo())
    module_repo.get_by_id = AsyncMock(return_value=make_module())
    return repo, promo_repo, module_repo


PAYLOAD = PromoModuleCreateIn(promo_id=1, module_id=1, workload=40)


class TestCreate:
    async def test_conflit(self, repos):
        repo, _, _ = repos
        repo.create = AsyncMock(return_value=None)
        with pytest.raises(Conflict):
            await service.create(AsyncMock(), PAYLOAD)

    async def test_module_inconnu(self, repos):
        repo, _, module_repo = repos
        module_repo.get_by_id = AsyncMock(return_value=None)
        repo.create = AsyncMock()
        with pytest.raises(NotFound):
            await service.create(AsyncMock(), PAYLOAD)
        repo.create.assert_not_awaited()

    async def test_succes(self, repos):
        repo, _, _ = repos
        repo.create = AsyncMock(return_value=make_promo_module(id=8))
        assert (await service.create(AsyncMock(), PAYLOAD)).id == 8


class TestStats:
    async def test_relu_a_chaque_appel(self, repos):
        repo, _, _ = repos
        first = make_promo_module(workload=40, relations=[make_relation(workload=10)])
        second = make_promo_module(workload=40, relations=[
            make_relation(workload=10),
            make_relation(teacher_id=2, workload=30),
            make_relation(state=RelationState.POTENTIAL, workload=50),
        ])
        repo.get_with_relations = AsyncMock(side_effect=[first, second])

        assert (await service.stats(AsyncMock(), 1)).coverage == 25.0
        assert (await service.stats(AsyncMock(), 1)).coverage == 100.0
        assert repo.get_with_relations.await_count == 2

    async def test_absent(self, repos):
        repo, _, _ = repos
        repo.get_with_relations = AsyncMock(return_value=None)
        with pytest.raises(NotFound):
            await service.stats(AsyncMock(), 1)


class TestDelete:
    async def test_decompte(self, repos):
        repo, _, _ = repos
        repo.get_by_id = AsyncMock(return_value=make_promo_module())
        repo.count_relations = AsyncMock(return_value=3)
        repo.delete = AsyncMock()
        assert await service.delete(AsyncMock(), 1) == {"success": True, "relations_count": 3}
