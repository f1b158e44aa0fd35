# tests/engine/relations/test_transitions.py
"""
Tests unitaires pour engine.relations.transitions

Couverture :
    plan_transition() :
        - diagonale → NOOP
        - potential/selected → ongoing → TransitionForbidden (message d'alerte)
        - ongoing → potential/selected → DUPLICATE (source conservée)
        - potential ↔ selected → MOVE (source supprimée)
        - valeurs str acceptées
    transition_matrix() :
        - les 9 couples sont couverts
"""
import pytest

from yboard.engine.relations.transitions import plan_transition, transition_matrix
from yboard.shared.enums import RelationState, TransitionKind
from yboard.shared.errors import TransitionForbidden, ValidationFailed

pytestmark = pytest.mark.engine

ONGOING, POTENTIAL, SELECTED = RelationState.ONGOING, RelationState.POTENTIAL, RelationState.SELECTED


class TestPlanTransition:
    @pytest.mark.parametrize("state", list(RelationState))
    def test_meme_etat_noop(self, state):
        plan = plan_transition(state, state)
        assert plan.kind == TransitionKind.NOOP
        assert plan.keeps_source

    @pytest.mark.parametrize("source", [POTENTIAL, SELECTED])
    def test_retour_vers_ongoing_interdit(self, source):
        with pytest.raises(TransitionForbidden) as exc:
            plan_transition(source, ONGOING)
        assert "Ongoing" in exc.value.message
        assert exc.value.context == {"source": source.value, "target": "ongoing"}

    def test_interdit_est_une_validation(self):
        with pytest.raises(ValidationFailed):
            plan_transition(SELECTED, ONGOING)

    @pytest.mark.parametrize("target", [POTENTIAL, SELECTED])
    def test_depuis_ongoing_duplique(self, target):
        plan = plan_transition(ONGOING, target)
        assert plan.kind == TransitionKind.DUPLICATE
        assert plan.keeps_source

    @pytest.mark.parametrize("source, target", [(POTENTIAL, SELECTED), (SELECTED, POTENTIAL)])
    def test_entre_candidats_deplace(self, source, target):
        plan = plan_transition(source, target)
        assert plan.kind == TransitionKind.MOVE
        assert not plan.keeps_source

    def test_valeurs_str(self):
        plan = plan_transition("ongoing", "selected")
        assert plan.source == ONGOING
        assert plan.target == SELECTED

    def test_etat_inconnu(self):
        with pytest.raises(ValueError):
            plan_transition("archived", "selected")


class TestTransitionMatrix:
    def test_matrice_complete(self):
        matrix = transition_matrix()
        assert len(matrix) == 9
        assert matrix[(ONGOING, ONGOING)] == "noop"
        assert matrix[(ONGOING, SELECTED)] == "duplicate"
        assert matrix[(POTENTIAL, SELECTED)] == "move"
        assert matrix[(SELECTED, ONGOING)] == "forbidden"
        assert matrix[(POTENTIAL, ONGOING)] == "forbidden"
