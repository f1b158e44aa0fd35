# tests/modules/auth/test_router.py
"""
Tests HTTP pour modules.auth.router

Couverture :
    POST /auth/login     → 200 {user, token} ; 401 sur identifiants faux
    POST /auth/register  → 201 {user} ; 409 email pris
    GET  /auth/me        → 200 (authentifié)
    GET  /health         → 200 sans token
"""
import pytest
from unittest.mock import AsyncMock

from yboard.modules.auth import router as auth_router
from yboard.shared.errors import Conflict, Unauthorized
from tests.conftest import make_user

pytestmark = pytest.mark.router


class TestAuthRouter:
    async def test_login(self, client, mocker):
        mocker.patch.object(auth_router.service, "login", AsyncMock(
            return_value={"user": make_user(), "token": "jwt"},
        ))
        r = await client.post("/auth/login", json={"email": "alice@ynov.com", "password": "secret1"})
        assert r.status_code == 200
        assert r.json()["token"] == "jwt"
        assert r.json()["token_type"] == "bearer"
        assert r.json()["user"]["firstname"] == "Alice"

    async def test_login_refuse(self, client, mocker):
        mocker.patch.object(auth_router.service, "login", AsyncMock(
            side_effect=Unauthorized("Email ou mot de passe incorrect."),
        ))
        r = await client.post("/auth/login", json={"email": "alice@ynov.com", "password": "faux"})
        assert r.status_code == 401
        assert r.json()["detail"]["code"] == "UNAUTHORIZED"

    async def test_register(self, client, mocker):
        mocker.patch.object(auth_router.service, "register", AsyncMock(return_value={"user": make_user(id=9)}))
        r = await client.post("/auth/register", json={
            "firstname": "A", "lastname": "B", "email": "a@ynov.com", "password": "secret1",
        })
        assert r.status_code == 201
        assert r.json()["user"]["id"] == 9

    async def test_register_email_pris(self, client, mocker):
        mocker.patch.object(auth_router.service, "register", AsyncMock(side_effect=Conflict("Email déjà utilisé.")))
        r = await client.post("/auth/register", json={
            "firstname": "A", "lastname": "B", "email": "a@ynov.com", "password": "secret1",
        })
        assert r.status_code == 409

    async def test_me(self, auth_client):
        r = await auth_client.get("/auth/me")
        assert r.status_code == 200
        assert r.json()["email"] == "alice@ynov.com"

    async def test_health(self, client):
        r = await client.get("/health")
        assert r.json()["status"] == "ok"
