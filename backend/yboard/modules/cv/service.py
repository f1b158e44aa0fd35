# modules/cv/service.py
"""
Dépôt, lecture et suppression des CV.

Le fichier vit dans CvStorage, la référence (cv_filename) sur le Teacher.
Un nouveau dépôt remplace l'ancien fichier.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from yboard.core.logging import get_logger
from yboard.infra.storage import CvStorage
from yboard.modules.teachers.service import TeacherService
from yboard.shared.errors import NotFound

logger = get_logger(__name__)

teacher_service = TeacherService()


class CvService:

    def __init__(self, storage: Optional[CvStorage] = None):
        self.storage = storage or CvStorage()

    async def upload(
        self, db: AsyncSession, teacher_id: int, content: bytes, content_type: Optional[str],
    ) -> str:
        teacher = await teacher_service.get(db, teacher_id)
        previous = teacher.cv_filename

        filename = self.storage.store(teacher_id, content, content_type)
        await teacher_service.attach_cv(db, teacher_id, filename)

        if previous and previous != filename:
            try:
                self.storage.delete(previous)
            except NotFound:
                logger.warning("cv_previous_missing", teacher_id=teacher_id, filename=previous)
        return filename

    def fetch(self, filename: str) -> bytes:
        return self.storage.fetch(filename)

    async def delete(self, db: AsyncSession, teacher_id: int) -> str:
        filename = await teacher_service.detach_cv(db, teacher_id)
        try:
            self.storage.delete(filename)
        except NotFound:
            # Référence déjà retirée : le fichier manquant n'est pas bloquant
            logger.warning("cv_file_missing", teacher_id=teacher_id, filename=filename)
        return filename
