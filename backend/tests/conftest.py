# tests/conftest.py
"""
Fixtures et factories partagées sur l'ensemble de la suite de tests.

Trois couches :
    1. Engine  : fonctions pures, aucun mock (factories SimpleNamespace)
    2. Service : repos mockés via pytest-mock, AsyncSession en AsyncMock
    3. Router  : httpx.AsyncClient + dependency_overrides FastAPI
"""
import pytest
from types import SimpleNamespace
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from yboard.main import app
from yboard.core.database import get_db
from yboard.infra.preferences import InMemoryPreferenceStore
from yboard.shared.deps import get_current_user, get_preference_store
from yboard.shared.enums import PromoLevel, RelationState


# ── Factories (SimpleNamespace : léger, sans ORM) ─────────────────────────────

def make_user(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "firstname": "Alice",
        "lastname": "Martin",
        "email": "alice@ynov.com",
        "hashed_password": "hashed_password",
        "last_connected": None,
        "created_at": datetime(2025, 1, 1),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_teacher(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "firstname": "Jean",
        "lastname": "Dupont",
        "status": "Contractor",
        "diploma": None,
        "comments": None,
        "rate": 50.0,
        "email_perso": None,
        "email_ynov": None,
        "phone_number": None,
        "cv_filename": None,
        "cv_uploaded_at": None,
        "created_at": datetime(2025, 1, 1),
        "relations": [],
        "ongoing": [],
        "potential": [],
        "selected": [],
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_promo(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "level": PromoLevel.B1,
        "specialty": "Informatique",
        "promo_modules": [],
    }
    defaults.update(kwargs)
    level = defaults["level"].value if isinstance(defaults["level"], PromoLevel) else defaults["level"]
    defaults.setdefault("label", f"{level} {defaults['specialty']}")
    return SimpleNamespace(**defaults)


def make_module(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "name": "Algorithmique",
        "promo_modules": [],
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_relation(**kwargs) -> SimpleNamespace:
    defaults = {
        "teacher_id": 1,
        "promo_module_id": 1,
        "state": RelationState.SELECTED,
        "workload": 10,
        "rate": None,
        "interview_date": None,
        "interview_comments": None,
        "decision": None,
        "teacher": None,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_promo_module(**kwargs) -> SimpleNamespace:
    """Les vues ongoing/potential/selected sont dérivées de `relations` si non fournies."""
    defaults = {
        "id": 1,
        "promo_id": 1,
        "module_id": 1,
        "workload": 40,
        "promo": None,
        "module": None,
        "relations": [],
    }
    defaults.update(kwargs)
    relations = defaults["relations"]
    for state in RelationState:
        defaults.setdefault(state.value, [r for r in relations if r.state == state])
    return SimpleNamespace(**defaults)


# ── DB mock factory ───────────────────────────────────────────────────────────

def make_async_db() -> AsyncMock:
    """
    AsyncMock simulant une AsyncSession SQLAlchemy.
    refresh() pose un id sur les objets qui n'en ont pas encore.
    """
    db = AsyncMock(spec=AsyncSession)
    added_objects: list = []

    db.add = MagicMock(side_effect=added_objects.append)
    db.added_objects = added_objects

    async def refresh_side_effect(obj):
        if hasattr(obj, "id") and not getattr(obj, "id", None):
            try:
                obj.id = 1
            except (AttributeError, TypeError):
                pass

    db.refresh = AsyncMock(side_effect=refresh_side_effect)
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.flush = AsyncMock()
    db.delete = AsyncMock()
    db.close = AsyncMock()

    return db


# ── Fixtures HTTP (httpx.AsyncClient + dependency_overrides) ─────────────────

@pytest.fixture
async def client():
    """Client sans auth : endpoints publics (/auth/login, /auth/register, /health)."""
    mock_db = AsyncMock(spec=AsyncSession)
    app.dependency_overrides[get_db] = lambda: mock_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def preference_store():
    return InMemoryPreferenceStore()


@pytest.fixture
async def auth_client(preference_store):
    """Client authentifié ; le slot de préférences est en mémoire."""
    mock_db = AsyncMock(spec=AsyncSession)
    mock_user = make_user()
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_current_user] = lambda: mock_user
    app.dependency_overrides[get_preference_store] = lambda: preference_store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
