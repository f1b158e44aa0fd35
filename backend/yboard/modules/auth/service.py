# modules/auth/service.py
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import datetime, timezone
from typing import Dict

from yboard.core.logging import get_logger
from yboard.core.security import verify_password, create_access_token
from yboard.modules.users.repository import UserRepository
from yboard.modules.users.service import UserService
from yboard.shared.errors import Unauthorized
from yboard.shared.models import User

logger = get_logger(__name__)

user_repo = UserRepository()
user_service = UserService()


class AuthService:

    async def login(self, db: AsyncSession, email: str, password: str) -> Dict:
        user = await user_repo.get_by_email(db, email)
        if not user or not verify_password(password, user.hashed_password):
            logger.warning("login_failed", email=email)
            raise Unauthorized("Email ou mot de passe incorrect.")

        user = await user_repo.update(db, user, {"last_connected": datetime.now(timezone.utc)})
        logger.info("login_succeeded", user_id=user.id)
        return {"user": user, "token": create_access_token({"sub": str(user.id)})}

    async def register(self, db: AsyncSession, payload) -> Dict:
        user: User = await user_service.create(db, payload)
        return {"user": user}
