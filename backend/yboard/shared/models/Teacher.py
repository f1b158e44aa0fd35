# yboard/shared/models/Teacher.py
"""
Intervenants.

rate : taux horaire par défaut, utilisé quand la relation ne porte pas
de taux spécifique (voir engine/workload/rates.py).
La suppression d'un Teacher supprime toutes ses relations (cascade).
"""
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from yboard.core.database import Base
from yboard.shared.enums import RelationState


class Teacher(Base):
    __tablename__ = "teachers"

    id        = Column(Integer, primary_key=True, index=True)
    firstname = Column(String, nullable=False)
    lastname  = Column(String, nullable=False, index=True)

    status   = Column(String, nullable=True)    # "Contractor" | "Salaried" | "To be recruited"
    diploma  = Column(String, nullable=True)
    comments = Column(Text, nullable=True)
    rate     = Column(Numeric(10, 2), nullable=True)   # €/h

    email_perso  = Column(String, nullable=True)
    email_ynov   = Column(String, nullable=True)
    phone_number = Column(String, nullable=True)

    # ── CV (fichier stocké par infra/storage.py) ─────────────
    cv_filename    = Column(String, nullable=True)
    cv_uploaded_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    relations = relationship(
        "Relation", back_populates="teacher",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    # ── Vues par état ────────────────────────────────────────
    @property
    def ongoing(self):
        return [r for r in self.relations if r.state == RelationState.ONGOING]

    @property
    def potential(self):
        return [r for r in self.relations if r.state == RelationState.POTENTIAL]

    @property
    def selected(self):
        return [r for r in self.relations if r.state == RelationState.SELECTED]

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"

    def __repr__(self):
        return f"<Teacher id={self.id} name={self.lastname} {self.firstname}>"
