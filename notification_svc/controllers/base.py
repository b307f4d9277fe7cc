from typing import Any, Generic, Optional, Type, TypeVar
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from notification_svc.database.database import Base

ModelType = TypeVar("ModelType", bound=Base) # type: ignore


class CRUDBase(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        """
        Controller base com as operações de persistência.

        **Parâmetros**

        * `model`: Uma classe de modelo SQLAlchemy
        """
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        result = await db.execute(select(self.model).filter(self.model.id == id))
        return result.scalars().first()

    async def save(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """Insere ou atualiza o registro completo; retorna só depois do commit."""
        db.add(db_obj)
        try:
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            raise
        await db.refresh(db_obj)
        return db_obj
