# modules/teachers/service.py
"""
Orchestration des intervenants : CRUD, statistiques, référence CV.

La suppression d'un teacher emporte toutes ses relations (cascade) :
le nombre de relations supprimées est renvoyé pour confirmation.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Dict
from datetime import datetime, timezone

from yboard.core.logging import get_logger
from yboard.engine.workload.stats import compute_teacher_stats, TeacherStats
from yboard.modules.teachers.repository import TeacherRepository
from yboard.shared.errors import NotFound
from yboard.shared.models import Teacher

logger = get_logger(__name__)

repo = TeacherRepository()


class TeacherService:

    # ── Lecture ───────────────────────────────────────────────

    async def list_all(self, db: AsyncSession) -> List[Teacher]:
        return await repo.list_all(db)

    async def count(self, db: AsyncSession) -> int:
        return await repo.count(db)

    async def get(self, db: AsyncSession, teacher_id: int) -> Teacher:
        teacher = await repo.get_with_relations(db, teacher_id)
        if not teacher:
            raise NotFound("Intervenant introuvable.", teacher_id=teacher_id)
        return teacher

    async def statistics(self, db: AsyncSession, teacher_id: int) -> TeacherStats:
        teacher = await self.get(db, teacher_id)
        return compute_teacher_stats(teacher)

    # ── Écriture ──────────────────────────────────────────────

    async def create(self, db: AsyncSession, payload) -> Teacher:
        teacher = await repo.create(db, payload)
        logger.info("teacher_created", teacher_id=teacher.id)
        return teacher

    async def update(self, db: AsyncSession, teacher_id: int, payload) -> Teacher:
        teacher = await repo.get_by_id(db, teacher_id)
        if not teacher:
            raise NotFound("Intervenant introuvable.", teacher_id=teacher_id)
        return await repo.update(db, teacher, payload)

    async def delete(self, db: AsyncSession, teacher_id: int) -> Dict:
        teacher = await repo.get_with_relations(db, teacher_id)
        if not teacher:
            raise NotFound("Intervenant introuvable.", teacher_id=teacher_id)

        relations_count = len(teacher.relations)
        label = f"{teacher.lastname} {teacher.firstname}"
        await repo.delete(db, teacher)

        logger.info("teacher_deleted", teacher_id=teacher_id, relations_count=relations_count)
        return {"success": True, "teacher": label, "relations_count": relations_count}

    # ── Référence CV (le fichier est géré par modules/cv) ─────

    async def attach_cv(self, db: AsyncSession, teacher_id: int, filename: str) -> Teacher:
        teacher = await repo.get_by_id(db, teacher_id)
        if not teacher:
            raise NotFound("Intervenant introuvable.", teacher_id=teacher_id)
        return await repo.set_cv(db, teacher, filename, datetime.now(timezone.utc))

    async def detach_cv(self, db: AsyncSession, teacher_id: int) -> str:
        """Retire la référence CV et renvoie le nom du fichier détaché."""
        teacher = await repo.get_by_id(db, teacher_id)
        if not teacher or not teacher.cv_filename:
            raise NotFound("Aucun CV pour cet intervenant.", teacher_id=teacher_id)
        filename = teacher.cv_filename
        await repo.set_cv(db, teacher, None, None)
        return filename
