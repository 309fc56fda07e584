from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship
from .base import Base


class StudyMaterialModel(Base):
    __tablename__ = "study_materials"

    material_id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    course_id = Column(
        String, ForeignKey("courses.course_id", ondelete="CASCADE"), index=True, nullable=False
    )
    file_url = Column(String, nullable=True)
    uploaded_by = Column(String, ForeignKey("users.user_id"), index=True, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    course = relationship("CourseModel", back_populates="materials", lazy="joined")
    uploader = relationship("UserModel", lazy="joined")
