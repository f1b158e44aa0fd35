# tests/modules/courses/test_service.py
"""
Tests unitaires pour modules.courses.service.ModuleService

Couverture :
    list_by_promo() : ne garde que les modules rattachés à la promo
    create()        : promo inconnue → NotFound ; promo + charge transmises au repo
    delete()        : rapport nom + décomptes
"""
import pytest
from unittest.mock import AsyncMock

from yboard.modules.courses import service as module_service_module
from yboard.modules.courses.service import ModuleService
from yboard.modules.courses.schemas import ModuleCreateIn
from yboard.shared.errors import NotFound
from tests.conftest import make_module, make_promo, make_promo_module, make_relation

pytestmark = pytest.mark.service

service = ModuleService()


@pytest.fixture
def repo(mocker):
    return mocker.patch.object(module_service_module, "repo")


@pytest.fixture
def promo_repo(mocker):
    return mocker.patch.object(module_service_module, "promo_repo")


class TestModuleService:
    async def test_list_by_promo(self, repo):
        algo = make_module(id=1, name="Algo", promo_modules=[make_promo_module(promo_id=1)])
        seo = make_module(id=2, name="SEO", promo_modules=[make_promo_module(promo_id=2)])
        repo.list_all = AsyncMock(return_value=[algo, seo])
        assert await service.list_by_promo(AsyncMock(), 2) == [seo]

    async def test_create_promo_inconnue(self, repo, promo_repo):
        promo_repo.get_by_id = AsyncMock(return_value=None)
        repo.create = AsyncMock()
        with pytest.raises(NotFound):
            await service.create(AsyncMock(), ModuleCreateIn(name="Algo", promo_id=9, workload=20))
        repo.create.assert_not_awaited()

    async def test_create_avec_promo(self, repo, promo_repo):
        promo_repo.get_by_id = AsyncMock(return_value=make_promo())
        repo.create = AsyncMock(return_value=make_module(id=4))
        db = AsyncMock()

        await service.create(db, ModuleCreateIn(name="Algo", promo_id=1, workload=20))

        repo.create.assert_awaited_once_with(db, "Algo", 1, 20)

    async def test_delete_rapport(self, repo):
        module = make_module(name="Algo", promo_modules=[
            make_promo_module(relations=[make_relation()]),
            make_promo_module(id=2),
        ])
        repo.get_with_relations = AsyncMock(return_value=module)
        repo.delete = AsyncMock()
        result = await service.delete(AsyncMock(), 1)
        assert result == {"success": True, "module": "Algo", "promo_modules_count": 2, "relations_count": 1}


class TestModuleCreateIn:
    def test_promo_sans_charge_refusee(self):
        with pytest.raises(ValueError):
            ModuleCreateIn(name="Algo", promo_id=1)
