# notification-service/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from notification_svc.core.config import settings
from notification_svc.core.logging import configure_logging
from notification_svc.database import database
from notification_svc.middleware.loggerMiddleware import LoggingMiddleware
from notification_svc.routers import notificationRouter, preferenceRouter

configure_logging(settings.LOG_LEVEL)

all_routers = [
    preferenceRouter.router,
    notificationRouter.router,
]


@asynccontextmanager
async def lifespan_startup(app: FastAPI):
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)

    yield

    await database.engine.dispose()


app = FastAPI(lifespan=lifespan_startup,
              title="Notification Service",
              description="Dispatches notifications through each user's preferred channel",
              version="0.1.0")

# Registrados aqui (e não no lifespan) para que os testes com ASGITransport enxerguem as rotas
for router in all_routers:
    app.include_router(router)

app.add_middleware(LoggingMiddleware)
