"""Study material routes."""

from fastapi import APIRouter

from api.routes.resource_router import register_resource_routes
from core.dependencies import StudyMaterialManagerDep
from schemas.study_material import (
    CreateStudyMaterialRequest,
    StudyMaterial,
    UpdateStudyMaterialRequest,
)
from utils.converters import study_material_to_schema

router = APIRouter(prefix="/api/study-materials", tags=["Study Materials"])

register_resource_routes(
    router,
    manager_dep=StudyMaterialManagerDep,
    serialize=study_material_to_schema,
    response_model=StudyMaterial,
    create_model=CreateStudyMaterialRequest,
    update_model=UpdateStudyMaterialRequest,
    noun="study material",
)
