"""Announcement routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from api.routes.resource_router import register_resource_routes
from core.dependencies import AnnouncementManagerDep
from core.identity import get_current_user
from schemas.announcement import (
    Announcement,
    Comment,
    CreateAnnouncementRequest,
    CreateCommentRequest,
    UpdateAnnouncementRequest,
)
from schemas.user import User
from utils.converters import announcement_to_schema, comments_to_schema

router = APIRouter(prefix="/api/announcements", tags=["Announcements"])


@router.post(
    "/{announcement_id}/comments",
    response_model=List[Comment],
    status_code=status.HTTP_201_CREATED,
    summary="Add comment",
)
def add_comment(
    announcement_id: str,
    req: CreateCommentRequest,
    announcement_manager: AnnouncementManagerDep,
    current_user: User = Depends(get_current_user),
) -> List[Comment]:
    """Comment on an announcement and return the full comment list."""
    announcement = announcement_manager.add_comment(current_user, announcement_id, req.text)
    return comments_to_schema(announcement)


register_resource_routes(
    router,
    manager_dep=AnnouncementManagerDep,
    serialize=announcement_to_schema,
    response_model=Announcement,
    create_model=CreateAnnouncementRequest,
    update_model=UpdateAnnouncementRequest,
    noun="announcement",
)
