# yboard/shared/models/Relation.py
"""
Lien Teacher ↔ PromoModule, une seule table pour les trois états.

Clé composite (teacher_id, promo_module_id, state) :
  - au plus une relation par (teacher, promo_module, état)
  - un même teacher peut être ongoing, potential ET selected sur le même
    PromoModule (enregistrements indépendants)

Les champs d'entretien (interview_*, decision) n'ont de sens que pour
state == potential. Le repository refuse de les écrire sur un autre état.
"""
from sqlalchemy import Column, Integer, Boolean, Text, Numeric, DateTime, ForeignKey, CheckConstraint, Enum as SAEnum
from sqlalchemy.orm import relationship

from yboard.core.database import Base
from yboard.shared.enums import RelationState


class Relation(Base):
    __tablename__ = "relations"

    teacher_id      = Column(Integer, ForeignKey("teachers.id", ondelete="CASCADE"), primary_key=True)
    promo_module_id = Column(Integer, ForeignKey("promo_modules.id", ondelete="CASCADE"), primary_key=True, index=True)
    state           = Column(
        SAEnum(RelationState, name="relationstate", values_callable=lambda e: [m.value for m in e]),
        primary_key=True,
    )

    workload = Column(Integer, nullable=False)          # heures couvertes par ce teacher
    rate     = Column(Numeric(10, 2), nullable=True)    # surcharge du taux teacher

    # ── Potential uniquement ─────────────────────────────────
    interview_date     = Column(DateTime(timezone=True), nullable=True)
    interview_comments = Column(Text, nullable=True)
    decision           = Column(Boolean, nullable=True)

    __table_args__ = (
        CheckConstraint("workload > 0", name="ck_relation_workload_positive"),
    )

    teacher      = relationship("Teacher", back_populates="relations")
    promo_module = relationship("PromoModule", back_populates="relations")

    def __repr__(self):
        return (
            f"<Relation teacher={self.teacher_id} promo_module={self.promo_module_id} "
            f"state={self.state} workload={self.workload}>"
        )
