# yboard/modules/users/schemas.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime


class UserCreateIn(BaseModel):
    firstname: str = Field(..., min_length=1)
    lastname:  str = Field(..., min_length=1)
    email:     EmailStr
    password:  str = Field(..., min_length=6)


class UserUpdateIn(BaseModel):
    """Édition par un tiers : mot de passe optionnel, sans ancien mot de passe."""
    firstname: Optional[str] = Field(None, min_length=1)
    lastname:  Optional[str] = Field(None, min_length=1)
    email:     Optional[EmailStr] = None
    password:  Optional[str] = Field(None, min_length=6)

    @field_validator("firstname", "lastname", "email", "password")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Ce champ ne peut pas être nul.")
        return v


class ProfileUpdateIn(BaseModel):
    """Édition de son propre profil : changer de mot de passe exige l'actuel."""
    firstname: Optional[str] = Field(None, min_length=1)
    lastname:  Optional[str] = Field(None, min_length=1)
    email:     Optional[EmailStr] = None
    current_password: Optional[str] = None
    new_password:     Optional[str] = Field(None, min_length=6)

    @field_validator("firstname", "lastname", "email")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Ce champ ne peut pas être nul.")
        return v

    @model_validator(mode="after")
    def current_required_for_new(self):
        if self.new_password and not self.current_password:
            raise ValueError("Le mot de passe actuel est requis.")
        return self


class UsersDeleteIn(BaseModel):
    ids: List[int] = Field(..., min_length=1)


class UserOut(BaseModel):
    id: int
    firstname: str
    lastname: str
    email: str
    last_connected: Optional[datetime] = None
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class UsersDeletedOut(BaseModel):
    success: bool = True
    count: int
