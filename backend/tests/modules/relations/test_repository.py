# tests/modules/relations/test_repository.py
"""
Tests unitaires pour modules.relations.repository.RelationRepository.move

Couverture :
    - succès : delete(source) → flush → add(cible) → un seul commit
    - cible existante (IntegrityError) : rollback, renvoie None
    - autre erreur SQL : rollback puis propagation
    - rollback impossible : TransitionIncomplete
    - la cible ne reprend ni taux ni données d'entretien
"""
import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from yboard.modules.relations.repository import RelationRepository
from yboard.shared.enums import RelationState
from yboard.shared.errors import TransitionIncomplete
from yboard.shared.models import Relation
from tests.conftest import make_async_db

pytestmark = pytest.mark.service

repo = RelationRepository()


def _source():
    return Relation(
        teacher_id=1, promo_module_id=7, state=RelationState.POTENTIAL, workload=12,
        rate=55, interview_comments="ok", decision=True,
    )


class TestMove:
    async def test_succes(self):
        db = make_async_db()
        source = _source()

        moved = await repo.move(db, source, RelationState.SELECTED)

        db.delete.assert_awaited_once_with(source)
        db.flush.assert_awaited_once()
        db.commit.assert_awaited_once()
        db.rollback.assert_not_awaited()
        assert moved.state == RelationState.SELECTED
        assert (moved.teacher_id, moved.promo_module_id, moved.workload) == (1, 7, 12)
        assert moved.rate is None
        assert moved.interview_comments is None
        assert moved.decision is None

    async def test_ordre_delete_puis_add(self):
        db = make_async_db()
        manager = MagicMock()
        manager.attach_mock(db.delete, "delete")
        manager.attach_mock(db.flush, "flush")
        manager.attach_mock(db.add, "add")
        manager.attach_mock(db.commit, "commit")

        await repo.move(db, _source(), RelationState.SELECTED)

        names = [c[0] for c in manager.mock_calls]
        assert names == ["delete", "flush", "add", "commit"]

    async def test_cible_existante(self):
        db = make_async_db()
        db.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

        assert await repo.move(db, _source(), RelationState.SELECTED) is None
        db.rollback.assert_awaited_once()

    async def test_erreur_sql_propagee(self):
        db = make_async_db()
        db.flush.side_effect = OperationalError("DELETE", {}, Exception("connexion perdue"))

        with pytest.raises(OperationalError):
            await repo.move(db, _source(), RelationState.SELECTED)
        db.rollback.assert_awaited_once()

    async def test_rollback_impossible(self):
        db = make_async_db()
        db.commit.side_effect = OperationalError("COMMIT", {}, Exception("connexion perdue"))
        db.rollback.side_effect = OperationalError("ROLLBACK", {}, Exception("connexion perdue"))

        with pytest.raises(TransitionIncomplete) as exc:
            await repo.move(db, _source(), RelationState.SELECTED)
        assert exc.value.context["source"] == "potential"
        assert exc.value.context["target"] == "selected"


class TestCreate:
    async def test_doublon_renvoie_none(self):
        db = make_async_db()
        db.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

        result = await repo.create(
            db, teacher_id=1, promo_module_id=7, state=RelationState.SELECTED, workload=3,
        )
        assert result is None
        db.rollback.assert_awaited_once()
