import logging
from contextlib import asynccontextmanager
from zoneinfo import ZoneInfo

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from invitapp.adapter.services.s3_storage import S3ObjectStorage
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


def build_object_storage(ApplicationConfig):
    """S3 storage when bucket and region are set, otherwise None (uploads disabled)"""
    if not (ApplicationConfig.S3_BUCKET and ApplicationConfig.S3_REGION):
        logger.warning("S3_BUCKET/S3_REGION not set; upload endpoints are disabled")
        return None
    return S3ObjectStorage(
        bucket=ApplicationConfig.S3_BUCKET,
        region=ApplicationConfig.S3_REGION,
        access_key_id=ApplicationConfig.AWS_ACCESS_KEY_ID or None,
        secret_access_key=ApplicationConfig.AWS_SECRET_ACCESS_KEY or None,
    )


def create_app(ApplicationConfig, object_storage=None) -> FastAPI:
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield
        await engine.dispose()

    app = FastAPI(title="InvitApp API", version="0.1.0", lifespan=lifespan)

    app.state.config = ApplicationConfig
    # Unknown zone names fail here, at startup
    app.state.event_timezone = ZoneInfo(ApplicationConfig.EVENT_TIMEZONE)
    app.state.engine = engine
    app.state.session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    app.state.object_storage = object_storage or build_object_storage(ApplicationConfig)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from invitapp.api.routes import auth, health_check, invitation, uploads

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(invitation.router, prefix=prefix, tags=["Invitations"])
    app.include_router(uploads.router, prefix=prefix, tags=["Uploads"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
