from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import (
    CurrentUserId,
    DropdownParams,
    PaginationParams,
    get_current_user_id,
    provide,
)
from blogapi.schemas import PaginatedResponse, UserCreate, UserResponse, UserUpdate
from blogapi.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

Users = Annotated[UserService, Depends(provide(UserService))]


@router.get(
    "",
    response_model=PaginatedResponse[UserResponse],
    dependencies=[Depends(get_current_user_id)],
)
async def list_users(users: Users, pagination: PaginationParams = Depends()):
    return await users.get_all(
        skip=pagination.skip, take=pagination.limit, search=pagination.search
    )


@router.get("/dropdown", dependencies=[Depends(get_current_user_id)])
async def user_dropdown(users: Users, params: DropdownParams = Depends()):
    return await users.dropdown(params.fields, params.keyword)


@router.get("/{user_id}", response_model=UserResponse, dependencies=[Depends(get_current_user_id)])
async def get_user(user_id: int, users: Users):
    return await users.get(user_id)


# Registration is the one public write: there is no caller yet.
@router.post("", status_code=201, response_model=UserResponse)
async def create_user(data: UserCreate, users: Users):
    return await users.create(data)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, data: UserUpdate, caller_id: CurrentUserId, users: Users):
    return await users.update(user_id, data, owner_id=caller_id)


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: int, caller_id: CurrentUserId, users: Users):
    await users.delete(user_id, owner_id=caller_id)
