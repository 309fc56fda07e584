from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class AnnouncementModel(Base):
    __tablename__ = "announcements"

    announcement_id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    club_id = Column(String, ForeignKey("users.user_id"), index=True, nullable=False)
    content = Column(String, nullable=True)
    pinned = Column(Boolean, nullable=False, default=False)
    priority = Column(String, nullable=False, default="Medium")
    views = Column(Integer, nullable=False, default=0)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    club = relationship("UserModel", lazy="joined")
    comments = relationship(
        "AnnouncementCommentModel",
        back_populates="announcement",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="AnnouncementCommentModel.id",
    )


class AnnouncementCommentModel(Base):
    __tablename__ = "announcement_comments"

    id = Column(Integer, primary_key=True, index=True)
    announcement_id = Column(
        String,
        ForeignKey("announcements.announcement_id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    user_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), index=True, nullable=False)
    text = Column(String, nullable=False)
    created_at = Column(String, nullable=False)

    announcement = relationship("AnnouncementModel", back_populates="comments")
    user = relationship("UserModel", lazy="joined")
