"""Assignment routes: CRUD, submission and grading."""

from fastapi import APIRouter, Depends

from api.routes.resource_router import register_resource_routes
from core.dependencies import AssignmentManagerDep
from core.identity import get_current_user
from schemas.assignment import (
    Assignment,
    CreateAssignmentRequest,
    GradeSubmissionRequest,
    SubmitAssignmentRequest,
    UpdateAssignmentRequest,
)
from schemas.user import User
from utils.converters import assignment_to_schema

router = APIRouter(prefix="/api/assignments", tags=["Assignments"])


@router.post("/{assignment_id}/submit", response_model=Assignment, summary="Submit assignment")
def submit_assignment(
    assignment_id: str,
    req: SubmitAssignmentRequest,
    assignment_manager: AssignmentManagerDep,
    current_user: User = Depends(get_current_user),
) -> Assignment:
    """Submit the caller's work for an assignment.

    Only students enrolled in the assignment's course may submit, once each.
    """
    assignment = assignment_manager.submit(current_user, assignment_id, req.file_url)
    return assignment_to_schema(assignment, current_user)


@router.patch(
    "/{assignment_id}/submissions/{student_id}",
    response_model=Assignment,
    summary="Grade submission",
)
def grade_submission(
    assignment_id: str,
    student_id: str,
    req: GradeSubmissionRequest,
    assignment_manager: AssignmentManagerDep,
    current_user: User = Depends(get_current_user),
) -> Assignment:
    assignment = assignment_manager.grade(
        current_user, assignment_id, student_id, marks=req.marks, feedback=req.feedback
    )
    return assignment_to_schema(assignment, current_user)


register_resource_routes(
    router,
    manager_dep=AssignmentManagerDep,
    serialize=assignment_to_schema,
    response_model=Assignment,
    create_model=CreateAssignmentRequest,
    update_model=UpdateAssignmentRequest,
    noun="assignment",
)
