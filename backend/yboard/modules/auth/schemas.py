# yboard/modules/auth/schemas.py
from pydantic import BaseModel, EmailStr

from yboard.modules.users.schemas import UserCreateIn, UserOut


class LoginIn(BaseModel):
    email:    EmailStr
    password: str


class RegisterIn(UserCreateIn):
    """Inscription : mêmes champs qu'une création de compte."""


class LoginOut(BaseModel):
    user:       UserOut
    token:      str
    token_type: str = "bearer"


class RegisterOut(BaseModel):
    user: UserOut
