# yboard/shared/enums.py
"""
Toutes les énumérations du projet YBoard.

Source unique de vérité pour les états, niveaux et statuts.
Importé par les modèles, schemas, services et engine.
"""

from enum import Enum


class RelationState(str, Enum):
    ONGOING   = "ongoing"     # Snapshot année passée : informatif, jamais compté
    POTENTIAL = "potential"   # Candidats non confirmés : jamais comptés
    SELECTED  = "selected"    # Seul état compté dans la couverture


class PromoLevel(str, Enum):
    B1 = "B1"
    B2 = "B2"
    B3 = "B3"
    M1 = "M1"
    M2 = "M2"


class TeacherStatus(str, Enum):
    CONTRACTOR      = "Contractor"
    SALARIED        = "Salaried"
    TO_BE_RECRUITED = "To be recruited"


class WorkloadStatus(str, Enum):
    UNDER_ALLOCATED    = "under-allocated"        # < 50 %
    PARTIALLY_ALLOCATED = "partially allocated"   # [50, 80)
    ADEQUATELY_ALLOCATED = "adequately allocated" # [80, 100]
    OVER_ALLOCATED     = "over-allocated"         # > 100 %


class TransitionKind(str, Enum):
    NOOP      = "noop"
    DUPLICATE = "duplicate"   # ongoing → potential/selected (copie)
    MOVE      = "move"        # potential ↔ selected (déplacement)
