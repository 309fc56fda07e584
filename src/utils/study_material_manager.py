"""Study material management utilities."""

from typing import Any, Dict

from models.study_material import StudyMaterialModel
from schemas.user import User
from utils.course_manager import CourseManager
from utils.policies import (
    ResourcePolicy,
    is_course_member,
    is_course_professor_or_admin,
    via_course,
)
from utils.resource_manager import ResourceManager


class StudyMaterialManager(ResourceManager):
    """Manages course study materials."""

    policy = ResourcePolicy(
        name="Study material",
        model=StudyMaterialModel,
        id_field="material_id",
        creator_roles=frozenset({"professor", "admin"}),
        owner_field="uploaded_by",
        can_view=via_course(is_course_member),
        can_write=via_course(is_course_professor_or_admin),
        order_by=(StudyMaterialModel.created_at.desc(),),
    )

    def _build(self, actor: User, data: Dict[str, Any]) -> StudyMaterialModel:
        CourseManager(self.db).get_course_for_creation(actor, data["course_id"])
        return StudyMaterialModel(**data)
