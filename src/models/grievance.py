from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class GrievanceModel(Base):
    __tablename__ = "grievances"

    grievance_id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False)
    priority = Column(String, nullable=False, default="medium")
    status = Column(String, nullable=False, default="open")
    created_by = Column(String, ForeignKey("users.user_id"), index=True, nullable=False)
    assigned_to = Column(String, ForeignKey("users.user_id"), index=True, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    creator = relationship("UserModel", foreign_keys=[created_by], lazy="joined")
    assignee = relationship("UserModel", foreign_keys=[assigned_to], lazy="joined")
    # Append-only
    updates = relationship(
        "GrievanceUpdateModel",
        back_populates="grievance",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="GrievanceUpdateModel.id",
    )


class GrievanceUpdateModel(Base):
    __tablename__ = "grievance_updates"

    id = Column(Integer, primary_key=True, index=True)
    grievance_id = Column(
        String, ForeignKey("grievances.grievance_id", ondelete="CASCADE"), index=True, nullable=False
    )
    comment = Column(String, nullable=False)
    updated_by = Column(String, ForeignKey("users.user_id"), index=True, nullable=False)
    status = Column(String, nullable=False)
    created_at = Column(String, nullable=False)

    grievance = relationship("GrievanceModel", back_populates="updates")
    author = relationship("UserModel", lazy="joined")
