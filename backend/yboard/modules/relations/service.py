# modules/relations/service.py
"""
Façade du store de relations + exécution des transitions.

Pipeline d'une transition (glisser-déposer) :
    1. plan_transition()     → NOOP | DUPLICATE | MOVE (ou TransitionForbidden)
    2. exécution             → create() pour DUPLICATE, repo.move() pour MOVE
    3. relecture du PromoModule (populate_existing) → compute_stats()

Toutes les validations ont lieu avant la moindre écriture.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, Optional

from yboard.core.logging import get_logger
from yboard.engine.relations.transitions import plan_transition, transition_matrix, CANDIDATE_STATES
from yboard.engine.workload.stats import compute_stats, WorkloadStats
from yboard.modules.relations.repository import RelationRepository
from yboard.modules.promo_modules.repository import PromoModuleRepository
from yboard.modules.teachers.repository import TeacherRepository
from yboard.shared.enums import RelationState, TransitionKind
from yboard.shared.errors import Conflict, NotFound, ValidationFailed
from yboard.shared.models import Relation

logger = get_logger(__name__)

repo = RelationRepository()
teacher_repo = TeacherRepository()
promo_module_repo = PromoModuleRepository()

INTERVIEW_FIELDS = frozenset({"interview_date", "interview_comments", "decision"})
UPDATABLE_FIELDS = INTERVIEW_FIELDS | {"workload", "rate"}


def _check_workload(workload: Any) -> None:
    # bool est un int en Python : refusé explicitement
    if isinstance(workload, bool) or not isinstance(workload, int) or workload <= 0:
        raise ValidationFailed(
            "La charge doit être un entier strictement positif.", workload=workload,
        )


def _check_state_fields(state: RelationState, fields: Dict[str, Any]) -> None:
    interview = INTERVIEW_FIELDS & fields.keys()
    if interview and state != RelationState.POTENTIAL:
        raise ValidationFailed(
            "Les informations d'entretien ne concernent que les relations potential.",
            state=state.value, fields=sorted(interview),
        )


class RelationService:

    # ── Façade par état ───────────────────────────────────────

    async def get(
        self, db: AsyncSession, state: RelationState, teacher_id: int, promo_module_id: int,
    ) -> Relation:
        state = RelationState(state)
        relation = await repo.get(db, teacher_id, promo_module_id, state)
        if not relation:
            raise NotFound(
                f"Relation {state.value} introuvable.",
                teacher_id=teacher_id, promo_module_id=promo_module_id, state=state.value,
            )
        return relation

    async def create(
        self, db: AsyncSession, state: RelationState,
        teacher_id: int, promo_module_id: int, workload: int,
        rate: Optional[float] = None, **state_fields,
    ) -> Relation:
        state = RelationState(state)
        unknown = state_fields.keys() - INTERVIEW_FIELDS
        if unknown:
            raise ValidationFailed("Champs inconnus.", fields=sorted(unknown))
        _check_workload(workload)
        _check_state_fields(state, state_fields)

        if not await teacher_repo.get_by_id(db, teacher_id):
            raise NotFound("Intervenant introuvable.", teacher_id=teacher_id)
        if not await promo_module_repo.get_by_id(db, promo_module_id):
            raise NotFound("Module de promo introuvable.", promo_module_id=promo_module_id)
        if await repo.get(db, teacher_id, promo_module_id, state):
            raise Conflict(
                f"L'intervenant est déjà {state.value} sur ce module.",
                teacher_id=teacher_id, promo_module_id=promo_module_id, state=state.value,
            )

        relation = await repo.create(
            db,
            teacher_id=teacher_id,
            promo_module_id=promo_module_id,
            state=state,
            workload=workload,
            rate=rate,
            **state_fields,
        )
        if relation is None:
            # Insertion concurrente entre la vérification et le commit
            raise Conflict(
                f"L'intervenant est déjà {state.value} sur ce module.",
                teacher_id=teacher_id, promo_module_id=promo_module_id, state=state.value,
            )
        logger.info(
            "relation_created", state=state.value,
            teacher_id=teacher_id, promo_module_id=promo_module_id, workload=workload,
        )
        return relation

    async def update(
        self, db: AsyncSession, state: RelationState,
        teacher_id: int, promo_module_id: int, **fields,
    ) -> Relation:
        state = RelationState(state)
        unknown = fields.keys() - UPDATABLE_FIELDS
        if unknown:
            raise ValidationFailed("Champs non modifiables.", fields=sorted(unknown))
        if "workload" in fields:
            _check_workload(fields["workload"])
        _check_state_fields(state, fields)

        relation = await self.get(db, state, teacher_id, promo_module_id)
        return await repo.update(db, relation, fields)

    async def delete(
        self, db: AsyncSession, state: RelationState, teacher_id: int, promo_module_id: int,
    ) -> None:
        relation = await self.get(db, state, teacher_id, promo_module_id)
        await repo.delete(db, relation)
        logger.info(
            "relation_deleted", state=RelationState(state).value,
            teacher_id=teacher_id, promo_module_id=promo_module_id,
        )

    async def move(
        self, db: AsyncSession, teacher_id: int, promo_module_id: int,
        from_state: RelationState, to_state: RelationState,
    ) -> Relation:
        """Déplacement atomique potential ↔ selected."""
        from_state, to_state = RelationState(from_state), RelationState(to_state)
        if from_state == to_state or {from_state, to_state} - CANDIDATE_STATES:
            raise ValidationFailed(
                "Seul un déplacement entre potential et selected est possible.",
                source=from_state.value, target=to_state.value,
            )

        source = await self.get(db, from_state, teacher_id, promo_module_id)
        if await repo.get(db, teacher_id, promo_module_id, to_state):
            raise Conflict(
                f"L'intervenant est déjà {to_state.value} sur ce module.",
                teacher_id=teacher_id, promo_module_id=promo_module_id, state=to_state.value,
            )

        moved = await repo.move(db, source, to_state)
        if moved is None:
            raise Conflict(
                f"L'intervenant est déjà {to_state.value} sur ce module.",
                teacher_id=teacher_id, promo_module_id=promo_module_id, state=to_state.value,
            )
        return moved

    # ── Transitions ───────────────────────────────────────────

    async def transition(
        self, db: AsyncSession, teacher_id: int, promo_module_id: int,
        source: RelationState, target: RelationState,
    ) -> Dict:
        plan = plan_transition(source, target)
        relation = None

        if plan.kind == TransitionKind.DUPLICATE:
            original = await self.get(db, plan.source, teacher_id, promo_module_id)
            # Copie : même charge, sans taux ni entretien
            relation = await self.create(
                db, plan.target, teacher_id, promo_module_id, original.workload,
            )
        elif plan.kind == TransitionKind.MOVE:
            relation = await self.move(db, teacher_id, promo_module_id, plan.source, plan.target)

        logger.info(
            "relation_transition", kind=plan.kind.value,
            source=plan.source.value, target=plan.target.value,
            teacher_id=teacher_id, promo_module_id=promo_module_id,
        )
        return {
            "kind": plan.kind,
            "source": plan.source,
            "target": plan.target,
            "relation": relation,
            "stats": await self.fresh_stats(db, promo_module_id),
        }

    async def fresh_stats(self, db: AsyncSession, promo_module_id: int) -> WorkloadStats:
        promo_module = await promo_module_repo.get_with_relations(db, promo_module_id)
        if not promo_module:
            raise NotFound("Module de promo introuvable.", promo_module_id=promo_module_id)
        return compute_stats(promo_module)

    def rules(self):
        return [
            {"source": source, "target": target, "result": result}
            for (source, target), result in transition_matrix().items()
        ]
