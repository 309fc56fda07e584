from sqlalchemy import Column, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class CourseModel(Base):
    __tablename__ = "courses"

    course_id = Column(String, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    semester = Column(String, nullable=True)
    credits = Column(Integer, nullable=True)
    professor_id = Column(String, ForeignKey("users.user_id"), index=True, nullable=False)
    attendance = Column(Float, nullable=False, default=0.0)  # average attendance %
    grade = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    professor = relationship("UserModel", lazy="joined")
    enrollments = relationship(
        "CourseEnrollmentModel",
        back_populates="course",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    assignments = relationship(
        "AssignmentModel", back_populates="course", cascade="all, delete-orphan"
    )
    materials = relationship(
        "StudyMaterialModel", back_populates="course", cascade="all, delete-orphan"
    )

    @property
    def student_ids(self):
        return [enrollment.student_id for enrollment in self.enrollments]


class CourseEnrollmentModel(Base):
    __tablename__ = "course_enrollments"
    __table_args__ = (
        UniqueConstraint("course_id", "student_id", name="uq_course_enrollments_course_student"),
    )

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(
        String, ForeignKey("courses.course_id", ondelete="CASCADE"), index=True, nullable=False
    )
    student_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), index=True, nullable=False)
    enrolled_at = Column(String, nullable=False)

    course = relationship("CourseModel", back_populates="enrollments")
    student = relationship("UserModel", lazy="joined")
