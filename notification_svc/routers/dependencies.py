# notification_svc/routers/dependencies.py
from notification_svc.services.notification_service import NotificationService, notification_service
from notification_svc.services.preference_service import PreferenceService, preference_service


# Sobrescritas em testes via app.dependency_overrides
def get_preference_service() -> PreferenceService:
    return preference_service


def get_notification_service() -> NotificationService:
    return notification_service
