# yboard/shared/models/Promo.py
"""
Promos, modules et table de liaison PromoModule.

Promo        : une cohorte (niveau + spécialité)
Module       : un cours, indépendant de toute promo
PromoModule  : Module × Promo avec sa charge requise (workload, en heures).
               C'est l'unité sur laquelle la couverture est calculée.
"""
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint, CheckConstraint, Enum as SAEnum
from sqlalchemy.orm import relationship

from yboard.core.database import Base
from yboard.shared.enums import PromoLevel, RelationState


class Promo(Base):
    __tablename__ = "promos"

    id        = Column(Integer, primary_key=True, index=True)
    level     = Column(SAEnum(PromoLevel, name="promolevel", values_callable=lambda e: [m.value for m in e]), nullable=False, index=True)
    specialty = Column(String, nullable=False)

    promo_modules = relationship(
        "PromoModule", back_populates="promo",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    @property
    def label(self) -> str:
        """Clé de regroupement : "<level> <specialty>"."""
        level = self.level.value if isinstance(self.level, PromoLevel) else self.level
        return f"{level} {self.specialty}"

    def __repr__(self):
        return f"<Promo id={self.id} {self.level} {self.specialty}>"


class Module(Base):
    __tablename__ = "modules"

    id   = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)

    promo_modules = relationship(
        "PromoModule", back_populates="module",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    def __repr__(self):
        return f"<Module id={self.id} name={self.name}>"


class PromoModule(Base):
    __tablename__ = "promo_modules"

    id        = Column(Integer, primary_key=True, index=True)
    promo_id  = Column(Integer, ForeignKey("promos.id", ondelete="CASCADE"), nullable=False, index=True)
    module_id = Column(Integer, ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True)
    workload  = Column(Integer, nullable=False)   # heures requises

    __table_args__ = (
        UniqueConstraint("promo_id", "module_id", name="uq_promo_module"),
        CheckConstraint("workload > 0", name="ck_promo_module_workload_positive"),
    )

    promo     = relationship("Promo", back_populates="promo_modules")
    module    = relationship("Module", back_populates="promo_modules")
    relations = relationship(
        "Relation", back_populates="promo_module",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    # ── Vues par état (input de engine/workload/stats.py) ────
    @property
    def ongoing(self):
        return [r for r in self.relations if r.state == RelationState.ONGOING]

    @property
    def potential(self):
        return [r for r in self.relations if r.state == RelationState.POTENTIAL]

    @property
    def selected(self):
        return [r for r in self.relations if r.state == RelationState.SELECTED]

    def __repr__(self):
        return f"<PromoModule id={self.id} promo={self.promo_id} module={self.module_id} workload={self.workload}>"
