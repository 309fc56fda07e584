"""Course routes, including roster management."""

from fastapi import APIRouter, Depends

from api.routes.resource_router import register_resource_routes
from core.dependencies import CourseManagerDep
from core.identity import get_current_user
from schemas.course import Course, CreateCourseRequest, EnrollStudentRequest, UpdateCourseRequest
from schemas.user import User
from utils.converters import course_to_schema

router = APIRouter(prefix="/api/courses", tags=["Courses"])


@router.post("/{course_id}/students", response_model=Course, summary="Enroll student")
def enroll_student(
    course_id: str,
    req: EnrollStudentRequest,
    course_manager: CourseManagerDep,
    current_user: User = Depends(get_current_user),
) -> Course:
    course = course_manager.enroll(current_user, course_id, req.student_id)
    return course_to_schema(course, current_user)


@router.delete(
    "/{course_id}/students/{student_id}", response_model=Course, summary="Unenroll student"
)
def unenroll_student(
    course_id: str,
    student_id: str,
    course_manager: CourseManagerDep,
    current_user: User = Depends(get_current_user),
) -> Course:
    course = course_manager.unenroll(current_user, course_id, student_id)
    return course_to_schema(course, current_user)


register_resource_routes(
    router,
    manager_dep=CourseManagerDep,
    serialize=course_to_schema,
    response_model=Course,
    create_model=CreateCourseRequest,
    update_model=UpdateCourseRequest,
    noun="course",
)
