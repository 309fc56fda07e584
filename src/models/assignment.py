from sqlalchemy import Column, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class AssignmentModel(Base):
    __tablename__ = "assignments"

    assignment_id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    course_id = Column(
        String, ForeignKey("courses.course_id", ondelete="CASCADE"), index=True, nullable=False
    )
    due_date = Column(String, nullable=True)
    total_marks = Column(Float, nullable=True)
    status = Column(String, nullable=True)  # free-form, no transition graph
    created_by = Column(String, ForeignKey("users.user_id"), index=True, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    course = relationship("CourseModel", back_populates="assignments", lazy="joined")
    submissions = relationship(
        "SubmissionModel",
        back_populates="assignment",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="SubmissionModel.id",
    )


class SubmissionModel(Base):
    __tablename__ = "assignment_submissions"
    __table_args__ = (
        UniqueConstraint(
            "assignment_id", "student_id", name="uq_assignment_submissions_assignment_student"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    assignment_id = Column(
        String, ForeignKey("assignments.assignment_id", ondelete="CASCADE"), index=True, nullable=False
    )
    student_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), index=True, nullable=False)
    submitted_at = Column(String, nullable=False)
    file_url = Column(String, nullable=True)
    marks = Column(Float, nullable=True)
    feedback = Column(String, nullable=True)

    assignment = relationship("AssignmentModel", back_populates="submissions")
    student = relationship("UserModel", lazy="joined")
