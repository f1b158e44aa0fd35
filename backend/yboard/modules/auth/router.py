# modules/auth/router.py
from fastapi import APIRouter, status

from yboard.modules.auth.schemas import LoginIn, LoginOut, RegisterIn, RegisterOut
from yboard.modules.auth.service import AuthService
from yboard.modules.users.schemas import UserOut
from yboard.shared.deps import DbDep, UserDep
from yboard.shared.errors import YBoardError, to_http

router = APIRouter(prefix="/auth", tags=["Auth"])
service = AuthService()


@router.post("/login", response_model=LoginOut)
async def login(payload: LoginIn, db: DbDep):
    try:
        return await service.login(db, payload.email, payload.password)
    except YBoardError as e:
        raise to_http(e)


@router.post("/register", response_model=RegisterOut, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterIn, db: DbDep):
    try:
        return await service.register(db, payload)
    except YBoardError as e:
        raise to_http(e)


@router.get("/me", response_model=UserOut)
async def me(current_user: UserDep):
    return current_user
