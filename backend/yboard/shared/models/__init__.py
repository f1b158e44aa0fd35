# yboard/shared/models/__init__.py
"""
Point d'entrée unique pour tous les modèles SQLAlchemy.

TOUJOURS importer les modèles depuis ce fichier :
  from yboard.shared.models import Teacher, Relation, ...

→ Garantit que tous les modèles sont enregistrés dans Base.metadata
  avant la création des tables (Alembic, create_all).
"""

from yboard.shared.models.User     import User, UserPreference
from yboard.shared.models.Teacher  import Teacher
from yboard.shared.models.Promo    import Promo, Module, PromoModule
from yboard.shared.models.Relation import Relation

__all__ = [
    # User
    "User", "UserPreference",
    # Teacher
    "Teacher",
    # Promo
    "Promo", "Module", "PromoModule",
    # Relation
    "Relation",
]
