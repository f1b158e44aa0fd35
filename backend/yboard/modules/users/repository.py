# modules/users/repository.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select, delete, func
from typing import List, Optional

from yboard.shared.models import User


class UserRepository:

    async def list_all(self, db: AsyncSession) -> List[User]:
        r = await db.execute(select(User).order_by(User.lastname, User.firstname))
        return r.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        r = await db.execute(select(func.count(User.id)))
        return r.scalar_one()

    async def get_by_id(self, db: AsyncSession, user_id: int) -> Optional[User]:
        r = await db.execute(select(User).where(User.id == user_id))
        return r.scalar_one_or_none()

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        r = await db.execute(select(User).where(User.email == email))
        return r.scalar_one_or_none()

    async def create(self, db: AsyncSession, **fields) -> Optional[User]:
        """None si l'email est déjà pris."""
        db_obj = User(**fields)
        db.add(db_obj)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            return None
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, user: User, fields: dict) -> Optional[User]:
        for field, value in fields.items():
            setattr(user, field, value)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            return None
        await db.refresh(user)
        return user

    async def delete_many(self, db: AsyncSession, ids: List[int]) -> int:
        r = await db.execute(delete(User).where(User.id.in_(ids)))
        await db.commit()
        return r.rowcount
