"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes. Every
manager is built per request around the request-scoped DB session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from utils import announcement_manager
from utils import assignment_manager
from utils import course_manager
from utils import event_manager
from utils import grievance_manager
from utils import lost_found_manager
from utils import research_manager
from utils import study_material_manager
from utils import user_manager


def get_user_manager(db: Session = Depends(get_db)) -> user_manager.UserManager:
    """Get UserManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        UserManager instance.
    """
    return user_manager.UserManager(db)


def get_course_manager(db: Session = Depends(get_db)) -> course_manager.CourseManager:
    """Get CourseManager instance with request-scoped DB session."""
    return course_manager.CourseManager(db)


def get_study_material_manager(
    db: Session = Depends(get_db),
) -> study_material_manager.StudyMaterialManager:
    return study_material_manager.StudyMaterialManager(db)


def get_assignment_manager(
    db: Session = Depends(get_db),
) -> assignment_manager.AssignmentManager:
    return assignment_manager.AssignmentManager(db)


def get_event_manager(db: Session = Depends(get_db)) -> event_manager.EventManager:
    return event_manager.EventManager(db)


def get_announcement_manager(
    db: Session = Depends(get_db),
) -> announcement_manager.AnnouncementManager:
    return announcement_manager.AnnouncementManager(db)


def get_grievance_manager(
    db: Session = Depends(get_db),
) -> grievance_manager.GrievanceManager:
    return grievance_manager.GrievanceManager(db)


def get_lost_found_manager(
    db: Session = Depends(get_db),
) -> lost_found_manager.LostFoundManager:
    return lost_found_manager.LostFoundManager(db)


def get_research_manager(db: Session = Depends(get_db)) -> research_manager.ResearchManager:
    return research_manager.ResearchManager(db)


# Type aliases for dependency injection
UserManagerDep = Annotated[user_manager.UserManager, Depends(get_user_manager)]
CourseManagerDep = Annotated[course_manager.CourseManager, Depends(get_course_manager)]
StudyMaterialManagerDep = Annotated[
    study_material_manager.StudyMaterialManager, Depends(get_study_material_manager)
]
AssignmentManagerDep = Annotated[
    assignment_manager.AssignmentManager, Depends(get_assignment_manager)
]
EventManagerDep = Annotated[event_manager.EventManager, Depends(get_event_manager)]
AnnouncementManagerDep = Annotated[
    announcement_manager.AnnouncementManager, Depends(get_announcement_manager)
]
GrievanceManagerDep = Annotated[
    grievance_manager.GrievanceManager, Depends(get_grievance_manager)
]
LostFoundManagerDep = Annotated[
    lost_found_manager.LostFoundManager, Depends(get_lost_found_manager)
]
ResearchManagerDep = Annotated[research_manager.ResearchManager, Depends(get_research_manager)]
