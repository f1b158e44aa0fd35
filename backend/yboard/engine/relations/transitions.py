# engine/relations/transitions.py
"""
Machine à états des relations : ZÉRO accès DB.

Décide ce que produit un glisser-déposer d'une relation (teacher, état
source) vers un état cible. L'exécution (create / move) est faite par
modules/relations/service.py.

Règles (première qui s'applique) :
    1. source == cible                          → NOOP
    2. cible == ongoing, source ≠ ongoing       → TransitionForbidden
    3. source == ongoing, cible ∈ {pot, sel}    → DUPLICATE (la source reste)
    4. source, cible ∈ {pot, sel}, distinctes   → MOVE (la source disparaît)

La matrice 3×3 est couverte intégralement ; toute autre combinaison est
une erreur interne.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from yboard.shared.enums import RelationState, TransitionKind
from yboard.shared.errors import TransitionForbidden

CANDIDATE_STATES = frozenset({RelationState.POTENTIAL, RelationState.SELECTED})

FORBIDDEN_MESSAGES: Dict[RelationState, str] = {
    RelationState.POTENTIAL: "Impossible de déplacer un enseignant de Potential vers Ongoing",
    RelationState.SELECTED:  "Impossible de déplacer un enseignant de Selected vers Ongoing",
}


@dataclass(frozen=True)
class TransitionPlan:
    source: RelationState
    target: RelationState
    kind: TransitionKind

    @property
    def keeps_source(self) -> bool:
        return self.kind != TransitionKind.MOVE


def plan_transition(source: RelationState, target: RelationState) -> TransitionPlan:
    source = RelationState(source)
    target = RelationState(target)

    if source == target:
        return TransitionPlan(source, target, TransitionKind.NOOP)

    if target == RelationState.ONGOING:
        raise TransitionForbidden(
            FORBIDDEN_MESSAGES[source],
            source=source.value, target=target.value,
        )

    if source == RelationState.ONGOING and target in CANDIDATE_STATES:
        return TransitionPlan(source, target, TransitionKind.DUPLICATE)

    if source in CANDIDATE_STATES and target in CANDIDATE_STATES:
        return TransitionPlan(source, target, TransitionKind.MOVE)

    raise RuntimeError(f"Transition non couverte : {source.value} → {target.value}")


def transition_matrix() -> Dict[Tuple[RelationState, RelationState], str]:
    """Matrice complète (source, cible) → kind | "forbidden". Sert à l'aide du front."""
    matrix = {}
    for source in RelationState:
        for target in RelationState:
            try:
                matrix[(source, target)] = plan_transition(source, target).kind.value
            except TransitionForbidden:
                matrix[(source, target)] = "forbidden"
    return matrix
