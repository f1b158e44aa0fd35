# yboard/shared/models/User.py
"""
Comptes d'accès à l'outil (personnel administratif).

User n'est pas une entité du modèle de charge : il sert uniquement à
l'authentification et porte les préférences d'affichage (UserPreference).
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from yboard.core.database import Base


class User(Base):
    __tablename__ = "users"

    id        = Column(Integer, primary_key=True, index=True)
    firstname = Column(String, nullable=False)
    lastname  = Column(String, nullable=False)
    email     = Column(String, unique=True, index=True, nullable=False)

    hashed_password = Column(String, nullable=False)
    last_connected  = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    preferences = relationship(
        "UserPreference", back_populates="user",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"


class UserPreference(Base):
    """
    Slot clé/valeur durable par utilisateur.
    value : texte brut (JSON sérialisé par l'appelant).
    """
    __tablename__ = "user_preferences"

    id      = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    key     = Column(String, nullable=False)
    value   = Column(Text, nullable=True)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "key", name="uq_user_preference_key"),
    )

    user = relationship("User", back_populates="preferences")

    def __repr__(self):
        return f"<UserPreference user={self.user_id} key={self.key}>"
