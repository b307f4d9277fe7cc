# notification_svc/models/notificationPreferenceModel.py
import uuid

from sqlalchemy import Column, String, Boolean, DateTime, Enum, Uuid
from notification_svc.database.database import Base
from notification_svc.models.enums import NotificationChannel


class NotificationPreference(Base):
    __tablename__ = "notification_preferences"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    # A restrição UNIQUE garante uma única preferência por usuário
    user_id = Column(Uuid, unique=True, index=True, nullable=False)

    channel = Column(Enum(NotificationChannel, native_enum=False, length=16), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    contact_info = Column(String(255), nullable=True)

    created_on = Column(DateTime, nullable=False)
    updated_on = Column(DateTime, nullable=False)
