"""Lost-and-found routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.routes.resource_router import register_resource_routes
from core.dependencies import LostFoundManagerDep
from core.identity import get_current_user
from schemas.lost_found import (
    Category,
    CreateLostFoundItemRequest,
    ItemType,
    LostFoundItem,
    MatchItemRequest,
    Status,
    UpdateLostFoundItemRequest,
)
from schemas.user import User
from utils.converters import lost_found_to_schema

router = APIRouter(prefix="/api/lost-found", tags=["Lost and Found"])


@router.get("", response_model=List[LostFoundItem], summary="List lost-and-found items")
def list_items(
    lost_found_manager: LostFoundManagerDep,
    item_type: Optional[ItemType] = Query(default=None, alias="type"),
    status: Optional[Status] = None,
    category: Optional[Category] = None,
    current_user: User = Depends(get_current_user),
) -> List[LostFoundItem]:
    """List postings, optionally filtered.

    Closed postings are left out unless a status filter is given.
    """
    models = lost_found_manager.list(
        current_user, item_type=item_type, status=status, category=category
    )
    return [lost_found_to_schema(model, current_user) for model in models]


@router.get("/mine", response_model=List[LostFoundItem], summary="List my postings")
def list_my_items(
    lost_found_manager: LostFoundManagerDep,
    current_user: User = Depends(get_current_user),
) -> List[LostFoundItem]:
    return [
        lost_found_to_schema(model, current_user)
        for model in lost_found_manager.list_posted_by(current_user)
    ]


@router.put("/{item_id}/match", response_model=LostFoundItem, summary="Match item")
def match_item(
    item_id: str,
    req: MatchItemRequest,
    lost_found_manager: LostFoundManagerDep,
    current_user: User = Depends(get_current_user),
) -> LostFoundItem:
    item = lost_found_manager.match(current_user, item_id, req.matched_item_id)
    return lost_found_to_schema(item, current_user)


register_resource_routes(
    router,
    manager_dep=LostFoundManagerDep,
    serialize=lost_found_to_schema,
    response_model=LostFoundItem,
    create_model=CreateLostFoundItemRequest,
    update_model=UpdateLostFoundItemRequest,
    noun="item",
    include_list=False,
)
