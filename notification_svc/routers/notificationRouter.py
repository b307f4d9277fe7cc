# notification_svc/routers/notificationRouter.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from notification_svc.core.exceptions import DisabledError, NotFoundError
from notification_svc.database import database
from notification_svc.routers.dependencies import get_notification_service
from notification_svc.schemas.notificationSchema import NotificationRequest, NotificationResponse
from notification_svc.services.notification_service import NotificationService

router = APIRouter(prefix="/api/v1/notifications", tags=["Notifications"])


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def send_notification(
    request: NotificationRequest,
    db: AsyncSession = Depends(database.get_db),
    service: NotificationService = Depends(get_notification_service),
):
    """
    Envia a notificação pelo canal preferido do usuário.
    Falhas do provedor não geram erro: o registro volta com status FAILED.
    """
    try:
        return await service.send(db, request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DisabledError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=List[NotificationResponse])
async def get_history(
    user_id: UUID = Query(alias="userId"),
    db: AsyncSession = Depends(database.get_db),
    service: NotificationService = Depends(get_notification_service),
):
    """Busca o histórico de notificações (sem os registros apagados)."""
    return await service.get_history(db, user_id)
