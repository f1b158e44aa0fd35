# yboard/infra/preferences.py
"""
Slots de préférences clé/valeur (texte brut).

Deux implémentations interchangeables, injectées dans
engine/grouping/selection.py :
  - InMemoryPreferenceStore  : tests, scripts
  - DatabasePreferenceStore  : une ligne user_preferences par (user, clé)
"""
from typing import Dict, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from yboard.shared.models import UserPreference


class PreferenceStore(Protocol):

    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str) -> None: ...


class InMemoryPreferenceStore:

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value


class DatabasePreferenceStore:

    def __init__(self, db: AsyncSession, user_id: int):
        self.db = db
        self.user_id = user_id

    async def _get_row(self, key: str) -> Optional[UserPreference]:
        r = await self.db.execute(
            select(UserPreference).where(
                UserPreference.user_id == self.user_id,
                UserPreference.key == key,
            )
        )
        return r.scalar_one_or_none()

    async def get(self, key: str) -> Optional[str]:
        row = await self._get_row(key)
        return row.value if row else None

    async def set(self, key: str, value: str) -> None:
        row = await self._get_row(key)
        if row is None:
            self.db.add(UserPreference(user_id=self.user_id, key=key, value=value))
        else:
            row.value = value
        await self.db.commit()
