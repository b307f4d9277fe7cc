# notification_svc/schemas/notificationPreferenceSchema.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from uuid import UUID

from notification_svc.models.enums import NotificationChannel


# Os aliases seguem o JSON em camelCase dos clientes existentes; os nomes em snake_case também são aceitos
class PreferenceRequest(BaseModel):
    user_id: UUID = Field(alias="userId")
    enabled: bool = Field(alias="notificationEnabled")
    contact_info: Optional[str] = Field(default=None, alias="contactInfo")
    # Quando omitido, o canal é detectado a partir de contact_info
    channel: Optional[NotificationChannel] = Field(default=None, alias="type")

    class Config:
        populate_by_name = True


class PreferenceResponse(BaseModel):
    id: UUID
    user_id: UUID = Field(alias="userId")
    channel: NotificationChannel = Field(alias="type")
    enabled: bool
    contact_info: Optional[str] = Field(default=None, alias="contactInfo")
    created_on: datetime = Field(alias="createdOn")
    updated_on: datetime = Field(alias="updatedOn")

    class Config:
        from_attributes = True
        populate_by_name = True
