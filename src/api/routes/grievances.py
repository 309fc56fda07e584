"""Grievance routes."""

from fastapi import APIRouter, Depends

from api.routes.resource_router import register_resource_routes
from core.dependencies import GrievanceManagerDep
from core.identity import get_current_user
from schemas.grievance import (
    CreateGrievanceRequest,
    Grievance,
    GrievanceCommentRequest,
    UpdateGrievanceRequest,
)
from schemas.user import User
from utils.converters import grievance_to_schema

router = APIRouter(prefix="/api/grievances", tags=["Grievances"])


@router.put("/{grievance_id}/comment", response_model=Grievance, summary="Comment on grievance")
def comment_on_grievance(
    grievance_id: str,
    req: GrievanceCommentRequest,
    grievance_manager: GrievanceManagerDep,
    current_user: User = Depends(get_current_user),
) -> Grievance:
    grievance = grievance_manager.add_comment(current_user, grievance_id, req.comment)
    return grievance_to_schema(grievance, current_user)


register_resource_routes(
    router,
    manager_dep=GrievanceManagerDep,
    serialize=grievance_to_schema,
    response_model=Grievance,
    create_model=CreateGrievanceRequest,
    update_model=UpdateGrievanceRequest,
    noun="grievance",
)
