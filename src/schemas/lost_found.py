from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import UserRef

ItemType = Literal["lost", "found"]
Category = Literal["electronics", "documents", "keys", "bag", "clothing", "other"]
Status = Literal["active", "resolved", "closed"]


class Contact(BaseModel):
    email: Optional[str] = None
    phone: Optional[str] = None


class LostFoundRef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: str
    title: str
    item_type: ItemType = Field(alias="type")
    status: Status


class LostFoundItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: str
    title: str
    description: str
    item_type: ItemType = Field(alias="type")
    location: str
    category: Category
    contact: Contact = Contact()
    status: Status = "active"
    posted_by: Optional[UserRef] = None
    image_url: Optional[str] = None
    date_of_incident: Optional[str] = None
    matched_with: Optional[LostFoundRef] = None
    created_at: str
    updated_at: str


class CreateLostFoundItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    item_type: ItemType = Field(alias="type")
    location: str = Field(min_length=1)
    category: Category
    date_of_incident: Optional[str] = None
    contact: Optional[Contact] = None
    image_url: Optional[str] = None


class UpdateLostFoundItemRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    category: Optional[Category] = None
    status: Optional[Status] = None
    contact: Optional[Contact] = None
    image_url: Optional[str] = None
    posted_by: Optional[str] = None


class MatchItemRequest(BaseModel):
    matched_item_id: str
