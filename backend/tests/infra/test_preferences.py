# tests/infra/test_preferences.py
"""
Tests unitaires pour infra.preferences

Couverture :
    InMemoryPreferenceStore : get / set, valeurs initiales
    DatabasePreferenceStore :
        - get sans ligne → None
        - set sans ligne → add + commit
        - set avec ligne → mise à jour + commit, pas d'add
"""
import pytest
from unittest.mock import MagicMock

from yboard.infra.preferences import DatabasePreferenceStore, InMemoryPreferenceStore
from yboard.shared.models import UserPreference
from tests.conftest import make_async_db

pytestmark = pytest.mark.service


def _result(row):
    result = MagicMock()
    result.scalar_one_or_none.return_value = row
    return result


class TestInMemory:
    async def test_get_set(self):
        store = InMemoryPreferenceStore({"a": "1"})
        assert await store.get("a") == "1"
        assert await store.get("b") is None
        await store.set("b", "2")
        assert await store.get("b") == "2"


class TestDatabase:
    async def test_get_absent(self):
        db = make_async_db()
        db.execute.return_value = _result(None)
        assert await DatabasePreferenceStore(db, user_id=1).get("k") is None

    async def test_set_cree_la_ligne(self):
        db = make_async_db()
        db.execute.return_value = _result(None)
        await DatabasePreferenceStore(db, user_id=7).set("k", "v")

        added = db.add.call_args.args[0]
        assert isinstance(added, UserPreference)
        assert (added.user_id, added.key, added.value) == (7, "k", "v")
        db.commit.assert_awaited_once()

    async def test_set_met_a_jour(self):
        db = make_async_db()
        row = UserPreference(user_id=7, key="k", value="old")
        db.execute.return_value = _result(row)
        store = DatabasePreferenceStore(db, user_id=7)

        await store.set("k", "new")
        assert row.value == "new"
        db.add.assert_not_called()
        assert await store.get("k") == "new"
