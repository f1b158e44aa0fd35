# tests/modules/teachers/test_service.py
"""
Tests unitaires pour modules.teachers.service.TeacherService

Couverture :
    get()        : absent → NotFound
    statistics() : charges par état + coût selected
    delete()     : renvoie "Nom Prénom" et le nombre de relations supprimées
    attach_cv()  : référence + date posées
    detach_cv()  : sans CV → NotFound ; sinon renvoie le nom du fichier
"""
import pytest
from unittest.mock import AsyncMock

from yboard.modules.teachers import service as teacher_service_module
from yboard.modules.teachers.service import TeacherService
from yboard.shared.enums import RelationState
from yboard.shared.errors import NotFound
from tests.conftest import make_relation, make_teacher

pytestmark = pytest.mark.service

service = TeacherService()


@pytest.fixture
def repo(mocker):
    return mocker.patch.object(teacher_service_module, "repo")


class TestGet:
    async def test_absent(self, repo):
        repo.get_with_relations = AsyncMock(return_value=None)
        with pytest.raises(NotFound):
            await service.get(AsyncMock(), 42)

    async def test_statistics(self, repo):
        teacher = make_teacher(
            rate=50,
            ongoing=[make_relation(state=RelationState.ONGOING, workload=10)],
            selected=[make_relation(workload=20)],
        )
        repo.get_with_relations = AsyncMock(return_value=teacher)
        stats = await service.statistics(AsyncMock(), 1)
        assert stats.total_relations == 2
        assert stats.selected_workload == 20
        assert stats.selected_cost == 1000.0


class TestDelete:
    async def test_rapport(self, repo):
        teacher = make_teacher(relations=[make_relation(), make_relation(state=RelationState.ONGOING)])
        repo.get_with_relations = AsyncMock(return_value=teacher)
        repo.delete = AsyncMock()

        result = await service.delete(AsyncMock(), 1)

        assert result == {"success": True, "teacher": "Dupont Jean", "relations_count": 2}
        repo.delete.assert_awaited_once()

    async def test_absent(self, repo):
        repo.get_with_relations = AsyncMock(return_value=None)
        with pytest.raises(NotFound):
            await service.delete(AsyncMock(), 1)


class TestCv:
    async def test_attach(self, repo):
        teacher = make_teacher()
        repo.get_by_id = AsyncMock(return_value=teacher)
        repo.set_cv = AsyncMock(return_value=teacher)

        await service.attach_cv(AsyncMock(), 1, "1_1700000000000.pdf")

        _, _, filename, uploaded_at = repo.set_cv.call_args.args
        assert filename == "1_1700000000000.pdf"
        assert uploaded_at is not None

    async def test_detach_sans_cv(self, repo):
        repo.get_by_id = AsyncMock(return_value=make_teacher(cv_filename=None))
        with pytest.raises(NotFound):
            await service.detach_cv(AsyncMock(), 1)

    async def test_detach(self, repo):
        repo.get_by_id = AsyncMock(return_value=make_teacher(cv_filename="1_5.pdf"))
        repo.set_cv = AsyncMock()
        assert await service.detach_cv(AsyncMock(), 1) == "1_5.pdf"
        assert repo.set_cv.call_args.args[2:] == (None, None)
