"""Assignment and submission management utilities."""

import logging
from typing import Any, Dict, Optional

from core.exceptions import ConflictError, ForbiddenError, NotFoundError
from models.assignment import AssignmentModel, SubmissionModel
from schemas.user import User
from utils.course_manager import CourseManager
from utils.policies import (
    ResourcePolicy,
    is_course_member,
    is_course_professor_or_admin,
    via_course,
)
from utils.resource_manager import ResourceManager, utc_now

logger = logging.getLogger(__name__)


class AssignmentManager(ResourceManager):
    """Manages assignments owned by the professor of their course."""

    policy = ResourcePolicy(
        name="Assignment",
        model=AssignmentModel,
        id_field="assignment_id",
        creator_roles=frozenset({"professor", "admin"}),
        owner_field="created_by",
        can_view=via_course(is_course_member),
        can_write=via_course(is_course_professor_or_admin),
        order_by=(AssignmentModel.due_date, AssignmentModel.created_at),
    )

    def _build(self, actor: User, data: Dict[str, Any]) -> AssignmentModel:
        CourseManager(self.db).get_course_for_creation(actor, data["course_id"])
        return AssignmentModel(**data)

    def submit(self, actor: User, assignment_id: str, file_url: Optional[str]) -> AssignmentModel:
        """Append the actor's submission.

        Raises:
            ForbiddenError: If the actor is not a student enrolled in the course.
            ConflictError: If the actor already submitted.
        """
        self.require_role(actor, ("student",), "Only students can submit assignments")
        assignment = self.get(actor, assignment_id)
        if actor.user_id not in assignment.course.student_ids:
            raise ForbiddenError("You are not enrolled in this course")
        if any(s.student_id == actor.user_id for s in assignment.submissions):
            raise ConflictError("Already submitted")

        assignment.submissions.append(
            SubmissionModel(
                student_id=actor.user_id,
                submitted_at=utc_now(),
                file_url=file_url,
            )
        )
        self._commit("Already submitted")
        self.db.refresh(assignment)
        logger.info("Student %s submitted assignment %s", actor.user_id, assignment_id)
        return assignment

    def grade(
        self,
        actor: User,
        assignment_id: str,
        student_id: str,
        marks: Optional[float] = None,
        feedback: Optional[str] = None,
    ) -> AssignmentModel:
        """Record marks and feedback on one student's submission."""
        assignment = self.get_writable(actor, assignment_id)
        submission = next(
            (s for s in assignment.submissions if s.student_id == student_id), None
        )
        if submission is None:
            raise NotFoundError("Submission", student_id)
        if marks is not None:
            submission.marks = marks
        if feedback is not None:
            submission.feedback = feedback
        assignment.updated_at = utc_now()
        self.db.commit()
        self.db.refresh(assignment)
        logger.info("Graded submission of %s on assignment %s", student_id, assignment_id)
        return assignment
