# modules/users/service.py
"""
Comptes d'accès. Les mots de passe ne transitent jamais en clair
au-delà de ce module : hash_password() avant toute écriture.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from yboard.core.logging import get_logger
from yboard.core.security import hash_password, verify_password
from yboard.modules.users.repository import UserRepository
from yboard.shared.errors import Conflict, NotFound, Unauthorized
from yboard.shared.models import User

logger = get_logger(__name__)

repo = UserRepository()


class UserService:

    async def list_all(self, db: AsyncSession) -> List[User]:
        return await repo.list_all(db)

    async def count(self, db: AsyncSession) -> int:
        return await repo.count(db)

    async def create(self, db: AsyncSession, payload) -> User:
        if await repo.get_by_email(db, payload.email):
            raise Conflict("Email déjà utilisé.", email=payload.email)
        user = await repo.create(
            db,
            firstname=payload.firstname,
            lastname=payload.lastname,
            email=payload.email,
            hashed_password=hash_password(payload.password),
        )
        if user is None:
            raise Conflict("Email déjà utilisé.", email=payload.email)
        logger.info("user_created", user_id=user.id)
        return user

    async def update(self, db: AsyncSession, user_id: int, payload) -> User:
        user = await repo.get_by_id(db, user_id)
        if not user:
            raise NotFound("Utilisateur introuvable.", user_id=user_id)

        fields = payload.model_dump(exclude_unset=True, exclude={"password"})
        if payload.password:
            fields["hashed_password"] = hash_password(payload.password)
        return await self._save(db, user, fields)

    async def update_profile(self, db: AsyncSession, user: User, payload) -> User:
        fields = payload.model_dump(exclude_unset=True, exclude={"current_password", "new_password"})
        if payload.new_password:
            if not verify_password(payload.current_password, user.hashed_password):
                raise Unauthorized("Mot de passe actuel incorrect.", user_id=user.id)
            fields["hashed_password"] = hash_password(payload.new_password)
        return await self._save(db, user, fields)

    async def delete_many(self, db: AsyncSession, ids: List[int]) -> int:
        count = await repo.delete_many(db, ids)
        logger.info("users_deleted", requested=len(ids), count=count)
        return count

    async def _save(self, db: AsyncSession, user: User, fields: dict) -> User:
        email = fields.get("email")
        if email and email != user.email:
            existing = await repo.get_by_email(db, email)
            if existing and existing.id != user.id:
                raise Conflict("Email déjà utilisé.", email=email)
        updated = await repo.update(db, user, fields)
        if updated is None:
            raise Conflict("Email déjà utilisé.", email=email)
        return updated
