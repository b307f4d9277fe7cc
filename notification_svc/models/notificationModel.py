# notification_svc/models/notificationModel.py
import uuid

from sqlalchemy import Column, String, Text, Boolean, DateTime, Enum, Uuid
from notification_svc.database.database import Base
from notification_svc.models.enums import NotificationChannel, NotificationStatus


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, index=True, nullable=False)

    channel = Column(Enum(NotificationChannel, native_enum=False, length=16), nullable=False)  # copiado da preferência
    status = Column(Enum(NotificationStatus, native_enum=False, length=16), nullable=False)
    subject = Column(String(255), nullable=True)
    body = Column(Text, nullable=True)

    created_on = Column(DateTime, nullable=False)
    deleted = Column(Boolean, nullable=False, default=False)
