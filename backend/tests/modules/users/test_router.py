# tests/modules/users/test_router.py
"""
Tests HTTP pour modules.users.router

Couverture :
    GET   /users/          → 200
    POST  /users/ doublon  → 409 ; mot de passe court → 422
    PATCH /users/me        → 401 si mot de passe actuel faux
    POST  /users/delete    → 200 + count
"""
import pytest
from unittest.mock import AsyncMock

from yboard.modules.users import router as users_router
from yboard.shared.errors import Conflict, Unauthorized
from tests.conftest import make_user

pytestmark = pytest.mark.router


class TestUsersRouter:
    async def test_liste(self, auth_client, mocker):
        mocker.patch.object(users_router.service, "list_all", AsyncMock(return_value=[make_user()]))
        r = await auth_client.get("/users/")
        assert r.status_code == 200
        assert r.json()[0]["email"] == "alice@ynov.com"
        assert "hashed_password" not in r.json()[0]

    async def test_doublon(self, auth_client, mocker):
        mocker.patch.object(users_router.service, "create", AsyncMock(side_effect=Conflict("Email déjà utilisé.")))
        r = await auth_client.post("/users/", json={
            "firstname": "A", "lastname": "B", "email": "alice@ynov.com", "password": "secret1",
        })
        assert r.status_code == 409

    async def test_mot_de_passe_court(self, auth_client):
        r = await auth_client.post("/users/", json={
            "firstname": "A", "lastname": "B", "email": "a@ynov.com", "password": "123",
        })
        assert r.status_code == 422

    async def test_profil_mauvais_mot_de_passe(self, auth_client, mocker):
        mocker.patch.object(users_router.service, "update_profile", AsyncMock(
            side_effect=Unauthorized("Mot de passe actuel incorrect."),
        ))
        r = await auth_client.patch("/users/me", json={"current_password": "x", "new_password": "nouveau1"})
        assert r.status_code == 401
        assert r.headers["www-authenticate"] == "Bearer"

    async def test_suppression_masse(self, auth_client, mocker):
        mocker.patch.object(users_router.service, "delete_many", AsyncMock(return_value=2))
        r = await auth_client.post("/users/delete", json={"ids": [1, 2]})
        assert r.json() == {"success": True, "count": 2}

    async def test_update_champ_nul(self, auth_client, mocker):
        update = mocker.patch.object(users_router.service, "update", AsyncMock())
        r = await auth_client.patch("/users/2", json={"firstname": None})
        assert r.status_code == 422
        update.assert_not_awaited()

    async def test_update_email_nul(self, auth_client, mocker):
        update = mocker.patch.object(users_router.service, "update", AsyncMock())
        r = await auth_client.patch("/users/2", json={"email": None})
        assert r.status_code == 422
        update.assert_not_awaited()

    async def test_update_partiel(self, auth_client, mocker):
        update = mocker.patch.object(users_router.service, "update", AsyncMock(
            return_value=make_user(id=2, lastname="Durand"),
        ))
        r = await auth_client.patch("/users/2", json={"lastname": "Durand"})
        assert r.status_code == 200
        assert update.await_args.args[2].model_dump(exclude_unset=True) == {"lastname": "Durand"}

    async def test_profil_champ_nul(self, auth_client, mocker):
        update_profile = mocker.patch.object(users_router.service, "update_profile", AsyncMock())
        r = await auth_client.patch("/users/me", json={"lastname": None})
        assert r.status_code == 422
        update_profile.assert_not_awaited()
