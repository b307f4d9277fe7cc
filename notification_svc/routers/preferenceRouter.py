# notification_svc/routers/preferenceRouter.py

from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from notification_svc.core.exceptions import NotFoundError
from notification_svc.database import database
from notification_svc.routers.dependencies import get_preference_service
from notification_svc.schemas.notificationPreferenceSchema import PreferenceRequest, PreferenceResponse
from notification_svc.services.preference_service import PreferenceService

router = APIRouter(prefix="/api/v1/preferences", tags=["Preferences"])


@router.post("", response_model=PreferenceResponse, status_code=status.HTTP_201_CREATED)
async def upsert_preference(
    request: PreferenceRequest,
    db: AsyncSession = Depends(database.get_db),
    service: PreferenceService = Depends(get_preference_service),
):
    """Cria ou atualiza a preferência de notificação do usuário."""
    return await service.upsert(db, request)


@router.get("", response_model=PreferenceResponse)
async def read_preference(
    user_id: UUID = Query(alias="userId"),
    db: AsyncSession = Depends(database.get_db),
    service: PreferenceService = Depends(get_preference_service),
):
    try:
        return await service.get_by_user_id(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
