"""Research internship routes: CRUD, applications and decisions."""

from typing import List

from fastapi import APIRouter, Depends, status

from api.routes.resource_router import register_resource_routes
from core.dependencies import ResearchManagerDep
from core.identity import get_current_user
from schemas.common import MessageResponse
from schemas.research import (
    ApplicantDecisionRequest,
    Application,
    CreateResearchInternshipRequest,
    MyApplication,
    ResearchInternship,
    UpdateResearchInternshipRequest,
)
from schemas.user import User
from utils.converters import application_to_schema, my_application_to_schema, research_to_schema

router = APIRouter(prefix="/api/research", tags=["Research"])


@router.get(
    "/applications/mine", response_model=List[MyApplication], summary="List my applications"
)
def list_my_applications(
    research_manager: ResearchManagerDep,
    current_user: User = Depends(get_current_user),
) -> List[MyApplication]:
    return [
        my_application_to_schema(internship, application)
        for internship, application in research_manager.list_applications_for(current_user)
    ]


@router.post(
    "/{internship_id}/apply",
    response_model=ResearchInternship,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to internship",
)
def apply_to_internship(
    internship_id: str,
    research_manager: ResearchManagerDep,
    current_user: User = Depends(get_current_user),
) -> ResearchInternship:
    internship = research_manager.apply(current_user, internship_id)
    return research_to_schema(internship, current_user)


@router.delete(
    "/{internship_id}/apply", response_model=MessageResponse, summary="Withdraw application"
)
def withdraw_application(
    internship_id: str,
    research_manager: ResearchManagerDep,
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    """Withdraw the caller's application.

    Raises:
        NotFoundError: If the caller has not applied.
        InvalidStateError: If the application is no longer pending.
    """
    research_manager.withdraw(current_user, internship_id)
    return MessageResponse(message="Application withdrawn successfully")


@router.get(
    "/{internship_id}/applicants", response_model=List[Application], summary="List applicants"
)
def list_applicants(
    internship_id: str,
    research_manager: ResearchManagerDep,
    current_user: User = Depends(get_current_user),
) -> List[Application]:
    return [
        application_to_schema(application)
        for application in research_manager.list_applicants(current_user, internship_id)
    ]


@router.patch(
    "/{internship_id}/applicants/{application_id}",
    response_model=Application,
    summary="Decide application",
)
def decide_application(
    internship_id: str,
    application_id: str,
    req: ApplicantDecisionRequest,
    research_manager: ResearchManagerDep,
    current_user: User = Depends(get_current_user),
) -> Application:
    application = research_manager.decide(
        current_user, internship_id, application_id, req.status
    )
    return application_to_schema(application)


register_resource_routes(
    router,
    manager_dep=ResearchManagerDep,
    serialize=research_to_schema,
    response_model=ResearchInternship,
    create_model=CreateResearchInternshipRequest,
    update_model=UpdateResearchInternshipRequest,
    noun="internship",
)
