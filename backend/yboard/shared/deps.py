# yboard/shared/deps.py
"""
Dépendances FastAPI réutilisables dans tous les routers.
Injectées via Depends() : jamais appelées directement.
"""
from typing import Annotated
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from yboard.core.database import get_db
from yboard.core.security import decode_token
from yboard.infra.preferences import DatabasePreferenceStore, PreferenceStore
from yboard.shared.models import User

bearer = HTTPBearer()


async def _get_user_from_token(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"code": "UNAUTHORIZED", "message": "Token invalide ou expiré"},
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(credentials.credentials)
        user_id = payload.get("sub")
        if user_id is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    result = await db.execute(select(User).where(User.id == int(user_id)))
    user = result.scalar_one_or_none()

    if not user:
        raise credentials_exception
    return user


# ── Deps publiques ─────────────────────────────────────────

async def get_current_user(
    user: Annotated[User, Depends(_get_user_from_token)],
) -> User:
    """Utilisateur authentifié."""
    return user


async def get_preference_store(
    user: Annotated[User, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PreferenceStore:
    """Slot de préférences durable de l'utilisateur courant."""
    return DatabasePreferenceStore(db, user_id=user.id)


# ── Type aliases pour les routers ─────────────────────────
DbDep         = Annotated[AsyncSession, Depends(get_db)]
UserDep       = Annotated[User, Depends(get_current_user)]
PreferenceDep = Annotated[PreferenceStore, Depends(get_preference_store)]
