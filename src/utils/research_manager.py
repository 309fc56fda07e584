"""Research internship and application management utilities."""

import logging
from typing import List, Tuple

from sqlalchemy import delete

from core.exceptions import ConflictError, InvalidStateError, NotFoundError
from models.research_internship import ResearchApplicationModel, ResearchInternshipModel
from schemas.user import User
from utils.policies import ResourcePolicy, owner_if_role, owner_or_admin
from utils.resource_manager import ResourceManager, new_id, utc_now

logger = logging.getLogger(__name__)


class ResearchManager(ResourceManager):
    """Manages research internship posts and student applications."""

    policy = ResourcePolicy(
        name="Research internship",
        model=ResearchInternshipModel,
        id_field="internship_id",
        creator_roles=frozenset({"professor", "admin"}),
        owner_field="professor_id",
        can_view=owner_if_role("professor", "professor_id"),
        can_write=owner_or_admin("professor_id"),
        order_by=(ResearchInternshipModel.created_at.desc(),),
    )

    def apply(self, actor: User, internship_id: str) -> ResearchInternshipModel:
        """Add a pending application for the actor.

        Raises:
            ConflictError: If the actor already applied.
        """
        self.require_role(actor, ("student",), "Only students can apply")
        internship = self.get(actor, internship_id)
        if any(a.student_id == actor.user_id for a in internship.applications):
            raise ConflictError("You have already applied for this internship")
        internship.applications.append(
            ResearchApplicationModel(
                application_id=new_id(),
                student_id=actor.user_id,
                status="pending",
                applied_at=utc_now(),
            )
        )
        self._commit("You have already applied for this internship")
        self.db.refresh(internship)
        logger.info("Student %s applied to internship %s", actor.user_id, internship_id)
        return internship

    def withdraw(self, actor: User, internship_id: str) -> None:
        """Withdraw the actor's application while it is still pending.

        Raises:
            NotFoundError: If the actor has no application.
            InvalidStateError: If the application was already decided.
        """
        self.require_role(actor, ("student",), "Only students can withdraw applications")
        internship = self.get(actor, internship_id)
        application = next(
            (a for a in internship.applications if a.student_id == actor.user_id), None
        )
        if application is None:
            raise NotFoundError("Application")

        # Conditional delete: a decision committed in between makes this a no-op
        result = self.db.execute(
            delete(ResearchApplicationModel)
            .where(ResearchApplicationModel.id == application.id)
            .where(ResearchApplicationModel.status == "pending")
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise InvalidStateError("Cannot withdraw a non-pending application")
        self.db.commit()
        logger.info("Student %s withdrew from internship %s", actor.user_id, internship_id)

    def list_applicants(self, actor: User, internship_id: str) -> List[ResearchApplicationModel]:
        return list(self.get_writable(actor, internship_id).applications)

    def decide(
        self, actor: User, internship_id: str, application_id: str, status: str
    ) -> ResearchApplicationModel:
        """Accept or reject one application."""
        internship = self.get_writable(actor, internship_id)
        application = next(
            (a for a in internship.applications if a.application_id == application_id),
            None,
        )
        if application is None:
            raise NotFoundError("Applicant", application_id)
        application.status = status
        self.db.commit()
        self.db.refresh(application)
        logger.info(
            "Application %s on internship %s marked %s", application_id, internship_id, status
        )
        return application

    def list_applications_for(
        self, actor: User
    ) -> List[Tuple[ResearchInternshipModel, ResearchApplicationModel]]:
        """Pair each internship the actor applied to with their application."""
        self.require_role(actor, ("student",), "Only students have applications")
        rows = (
            self.db.query(ResearchInternshipModel, ResearchApplicationModel)
            .join(
                ResearchApplicationModel,
                ResearchApplicationModel.internship_id == ResearchInternshipModel.internship_id,
            )
            .filter(ResearchApplicationModel.student_id == actor.user_id)
            .order_by(ResearchApplicationModel.applied_at.desc())
            .all()
        )
        return [(internship, application) for internship, application in rows]
