"""Course management utilities."""

import logging
from typing import Any, Dict, Iterable, List

from core.exceptions import ConflictError, NotFoundError
from models.course import CourseEnrollmentModel, CourseModel
from schemas.user import User
from utils.policies import ResourcePolicy, is_course_member, is_course_professor_or_admin
from utils.resource_manager import ResourceManager, utc_now

logger = logging.getLogger(__name__)


class CourseManager(ResourceManager):
    """Manages courses and their student enrollments."""

    policy = ResourcePolicy(
        name="Course",
        model=CourseModel,
        id_field="course_id",
        creator_roles=frozenset({"professor", "admin"}),
        owner_field="professor_id",
        can_view=is_course_member,
        can_write=is_course_professor_or_admin,
        order_by=(CourseModel.code,),
    )

    def _validated_students(self, student_ids: Iterable[str]) -> List[str]:
        unique_ids = list(dict.fromkeys(student_ids))
        for student_id in unique_ids:
            self.require_user(student_id, role="student")
        return unique_ids

    def _build(self, actor: User, data: Dict[str, Any]) -> CourseModel:
        student_ids = self._validated_students(data.pop("student_ids", None) or [])
        course = CourseModel(**data)
        for student_id in student_ids:
            course.enrollments.append(
                CourseEnrollmentModel(student_id=student_id, enrolled_at=data["created_at"])
            )
        return course

    def _apply_patch(self, model: CourseModel, patch: Dict[str, Any], actor: User) -> None:
        student_ids = patch.pop("student_ids", None)
        super()._apply_patch(model, patch, actor)
        if student_ids is None:
            return
        wanted = set(self._validated_students(student_ids))
        for enrollment in list(model.enrollments):
            if enrollment.student_id not in wanted:
                model.enrollments.remove(enrollment)
        now = utc_now()
        for student_id in wanted - set(model.student_ids):
            model.enrollments.append(
                CourseEnrollmentModel(student_id=student_id, enrolled_at=now)
            )

    def enroll(self, actor: User, course_id: str, student_id: str) -> CourseModel:
        """Add a student to the course roster.

        Raises:
            ConflictError: If the student is already enrolled.
        """
        course = self.get_writable(actor, course_id)
        self.require_user(student_id, role="student")
        if student_id in course.student_ids:
            raise ConflictError("Student is already enrolled in this course")
        course.enrollments.append(
            CourseEnrollmentModel(student_id=student_id, enrolled_at=utc_now())
        )
        self._commit("Student is already enrolled in this course")
        self.db.refresh(course)
        logger.info("Enrolled student %s in course %s", student_id, course_id)
        return course

    def unenroll(self, actor: User, course_id: str, student_id: str) -> CourseModel:
        course = self.get_writable(actor, course_id)
        enrollment = next(
            (e for e in course.enrollments if e.student_id == student_id), None
        )
        if enrollment is None:
            raise NotFoundError("Enrollment", student_id)
        course.enrollments.remove(enrollment)
        self.db.commit()
        self.db.refresh(course)
        logger.info("Removed student %s from course %s", student_id, course_id)
        return course

    def get_course_for_creation(self, actor: User, course_id: str) -> CourseModel:
        """Load the course a new assignment or material will belong to.

        Only the course professor and admins may attach documents to it.

        Raises:
            NotFoundError: If the course does not exist.
            ForbiddenError: If the actor does not teach the course.
        """
        return self.get_writable(actor, course_id)
