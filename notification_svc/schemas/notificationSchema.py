# notification_svc/schemas/notificationSchema.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from uuid import UUID

from notification_svc.models.enums import NotificationChannel, NotificationStatus


class NotificationRequest(BaseModel):
    user_id: UUID = Field(alias="userId")
    subject: str
    body: str

    class Config:
        populate_by_name = True


class NotificationResponse(BaseModel):
    id: UUID
    user_id: UUID = Field(alias="userId")
    channel: NotificationChannel = Field(alias="type")
    status: NotificationStatus
    subject: Optional[str] = None
    body: Optional[str] = None
    created_on: datetime = Field(alias="createdOn")

    class Config:
        from_attributes = True
        populate_by_name = True
