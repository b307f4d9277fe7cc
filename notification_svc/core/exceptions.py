# notification_svc/core/exceptions.py


class NotificationServiceError(Exception):
    """Erro base do serviço de notificações."""


class NotFoundError(NotificationServiceError):
    """O usuário nunca configurou uma preferência de notificação."""

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"Preference for user with id=[{user_id}] does not exist.")


class DisabledError(NotificationServiceError):
    """O usuário desativou as notificações."""

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User with id=[{user_id}] turned off their notifications.")


class InvalidContactFormatError(NotificationServiceError, ValueError):
    """O contato não pôde ser convertido em um número de telefone válido."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid phone number format: '{value}'. "
            "Expected format: +359893454943 or 359893454943"
        )
