from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship
from .base import Base


class LostFoundItemModel(Base):
    __tablename__ = "lost_found_items"

    item_id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    item_type = Column(String, index=True, nullable=False)  # 'lost' or 'found'
    location = Column(String, nullable=False)
    category = Column(String, index=True, nullable=False)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)
    status = Column(String, index=True, nullable=False, default="active")
    posted_by = Column(String, ForeignKey("users.user_id"), index=True, nullable=False)
    image_url = Column(String, nullable=True)
    date_of_incident = Column(String, nullable=True)
    matched_with = Column(
        String, ForeignKey("lost_found_items.item_id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    poster = relationship("UserModel", lazy="joined")
    matched_item = relationship("LostFoundItemModel", remote_side=[item_id])
