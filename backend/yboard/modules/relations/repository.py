# modules/relations/repository.py
"""
Accès DB pour la table unique `relations` (clé teacher, promo_module, état).

create() et move() renvoient None quand la clé cible existe déjà
(IntegrityError → rollback) : le service en fait un Conflict.

move() est l'unique chemin de déplacement : suppression de la source et
création de la cible dans la même transaction. Si le rollback échoue
lui-même, l'état de la base est inconnu → TransitionIncomplete.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy import select
from typing import Optional

from yboard.core.logging import get_logger
from yboard.shared.enums import RelationState
from yboard.shared.errors import TransitionIncomplete
from yboard.shared.models import Relation

logger = get_logger(__name__)


class RelationRepository:

    async def get(
        self, db: AsyncSession, teacher_id: int, promo_module_id: int, state: RelationState,
    ) -> Optional[Relation]:
        r = await db.execute(
            select(Relation).where(
                Relation.teacher_id == teacher_id,
                Relation.promo_module_id == promo_module_id,
                Relation.state == state,
            )
        )
        return r.scalar_one_or_none()

    async def create(self, db: AsyncSession, **fields) -> Optional[Relation]:
        db_obj = Relation(**fields)
        db.add(db_obj)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            return None
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, relation: Relation, fields: dict) -> Relation:
        for field, value in fields.items():
            setattr(relation, field, value)
        await db.commit()
        await db.refresh(relation)
        return relation

    async def delete(self, db: AsyncSession, relation: Relation) -> None:
        await db.delete(relation)
        await db.commit()

    async def move(self, db: AsyncSession, source: Relation, target_state: RelationState) -> Optional[Relation]:
        """
        Déplace `source` vers `target_state` avec la même charge.
        Ni taux ni données d'entretien ne suivent.
        """
        context = {
            "teacher_id": source.teacher_id,
            "promo_module_id": source.promo_module_id,
            "source": RelationState(source.state).value,
            "target": RelationState(target_state).value,
        }
        target = Relation(
            teacher_id=source.teacher_id,
            promo_module_id=source.promo_module_id,
            state=target_state,
            workload=source.workload,
        )
        try:
            await db.delete(source)
            await db.flush()
            db.add(target)
            await db.commit()
        except IntegrityError:
            await self._rollback(db, context)
            return None
        except SQLAlchemyError:
            await self._rollback(db, context)
            raise

        await db.refresh(target)
        return target

    async def _rollback(self, db: AsyncSession, context: dict) -> None:
        try:
            await db.rollback()
        except SQLAlchemyError as e:
            logger.error("relation_move_rollback_failed", error=str(e), **context)
            raise TransitionIncomplete(
                "Déplacement interrompu : la relation n'a pu être ni déplacée ni restaurée.",
                **context,
            ) from e
