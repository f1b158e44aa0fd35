# modules/users/router.py
from fastapi import APIRouter, Depends, status
from typing import List

from yboard.modules.users.service import UserService
from yboard.modules.users.schemas import (
    UserCreateIn,
    UserUpdateIn,
    ProfileUpdateIn,
    UsersDeleteIn,
    UserOut,
    UsersDeletedOut,
)
from yboard.shared.schemas import CountOut
from yboard.shared.deps import DbDep, UserDep, get_current_user
from yboard.shared.errors import YBoardError, to_http

router = APIRouter(prefix="/users", tags=["Users"], dependencies=[Depends(get_current_user)])
service = UserService()


@router.get("/", response_model=List[UserOut])
async def list_users(db: DbDep):
    return await service.list_all(db)


@router.get("/count", response_model=CountOut)
async def count_users(db: DbDep):
    return {"count": await service.count(db)}


@router.post("/", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreateIn, db: DbDep):
    try:
        return await service.create(db, payload)
    except YBoardError as e:
        raise to_http(e)


@router.patch("/me", response_model=UserOut, summary="Modifier son propre profil")
async def update_profile(payload: ProfileUpdateIn, current_user: UserDep, db: DbDep):
    try:
        return await service.update_profile(db, current_user, payload)
    except YBoardError as e:
        raise to_http(e)


@router.patch("/{user_id}", response_model=UserOut)
async def update_user(user_id: int, payload: UserUpdateIn, db: DbDep):
    try:
        return await service.update(db, user_id, payload)
    except YBoardError as e:
        raise to_http(e)


@router.post("/delete", response_model=UsersDeletedOut, summary="Suppression en masse")
async def delete_users(payload: UsersDeleteIn, db: DbDep):
    return {"success": True, "count": await service.delete_many(db, payload.ids)}
