from sqlalchemy import JSON, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class ResearchInternshipModel(Base):
    __tablename__ = "research_internships"

    internship_id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    professor_id = Column(String, ForeignKey("users.user_id"), index=True, nullable=False)
    duration = Column(String, nullable=True)
    stipend = Column(String, nullable=True)
    required_skills = Column(JSON, default=list)
    deadline = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    professor = relationship("UserModel", lazy="joined")
    applications = relationship(
        "ResearchApplicationModel",
        back_populates="internship",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ResearchApplicationModel.id",
    )


class ResearchApplicationModel(Base):
    __tablename__ = "research_applications"
    __table_args__ = (
        UniqueConstraint(
            "internship_id", "student_id", name="uq_research_applications_internship_student"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(String, unique=True, index=True, nullable=False)
    internship_id = Column(
        String,
        ForeignKey("research_internships.internship_id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    student_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), index=True, nullable=False)
    status = Column(String, nullable=False, default="pending")
    applied_at = Column(String, nullable=False)

    internship = relationship("ResearchInternshipModel", back_populates="applications")
    student = relationship("UserModel", lazy="joined")
