from typing import Annotated

from fastapi import APIRouter, Depends

from blogapi.dependencies import CurrentUserId, DropdownParams, PaginationParams, provide
from blogapi.schemas import DraftCreate, DraftResponse, DraftUpdate, PaginatedResponse
from blogapi.services.draft_service import DraftService

router = APIRouter(prefix="/drafts", tags=["drafts"])

Drafts = Annotated[DraftService, Depends(provide(DraftService))]


@router.get("", response_model=PaginatedResponse[DraftResponse])
async def list_drafts(
    user_id: CurrentUserId, drafts: Drafts, pagination: PaginationParams = Depends()
):
    return await drafts.get_all(
        skip=pagination.skip, take=pagination.limit, search=pagination.search, owner_id=user_id
    )


@router.get("/dropdown")
async def draft_dropdown(user_id: CurrentUserId, drafts: Drafts, params: DropdownParams = Depends()):
    return await drafts.dropdown(params.fields, params.keyword, owner_id=user_id)


@router.get("/{draft_id}", response_model=DraftResponse)
async def get_draft(draft_id: int, user_id: CurrentUserId, drafts: Drafts):
    return await drafts.get(draft_id, owner_id=user_id)


@router.post("", status_code=201, response_model=DraftResponse)
async def create_draft(data: DraftCreate, user_id: CurrentUserId, drafts: Drafts):
    return await drafts.create(data, owner_id=user_id)


@router.put("/{draft_id}", response_model=DraftResponse)
async def update_draft(draft_id: int, data: DraftUpdate, user_id: CurrentUserId, drafts: Drafts):
    return await drafts.update(draft_id, data, owner_id=user_id)


@router.delete("/{draft_id}", status_code=204)
async def delete_draft(draft_id: int, user_id: CurrentUserId, drafts: Drafts):
    await drafts.delete(draft_id, owner_id=user_id)
