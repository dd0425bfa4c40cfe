import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from emlak_crm.config import settings
from emlak_crm.core.exceptions import (
    EmlakCrmException,
    UnauthorizedException,
    NotFoundException,
    ForbiddenException,
    ValidationException,
    ServerErrorException,
    PdfGenerationException,
    UpstreamServiceException,
    error_key,
)
from emlak_crm.core.logging import configure_logging, get_logger
from emlak_crm.database import SessionLocal
from emlak_crm.routes import (
    contract_routes,
    meeting_routes,
    owner_routes,
    property_routes,
    tenant_routes,
    text_extraction_routes,
)
from emlak_crm.services.meeting_notifier import MeetingNotifier, database_fetcher, log_notification

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    notifier = None
    task = None
    if settings.MEETING_NOTIFIER_ENABLED:
        notifier = MeetingNotifier(database_fetcher(SessionLocal), log_notification)
        task = asyncio.create_task(notifier.run())

    logger.info("app_started", version=settings.APP_VERSION, meeting_notifier=notifier is not None)
    yield

    if notifier is not None:
        notifier.stop()
        await task


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,  # Disable in production
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS middleware
cors_origins = settings.cors_origins_list
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _error_body(exc: EmlakCrmException, detail: str | None = None) -> dict:
    return {"detail": detail or str(exc), "code": exc.code, "key": exc.key}


# Exception handlers
@app.exception_handler(UnauthorizedException)
async def unauthorized_exception_handler(request: Request, exc: UnauthorizedException):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=_error_body(exc),
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(NotFoundException)
async def not_found_exception_handler(request: Request, exc: NotFoundException):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_error_body(exc))


@app.exception_handler(ForbiddenException)
async def forbidden_exception_handler(request: Request, exc: ForbiddenException):
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content=_error_body(exc))


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(exc))


@app.exception_handler(ServerErrorException)
async def server_error_exception_handler(request: Request, exc: ServerErrorException):
    logger.error("server_error", path=request.url.path, code=exc.code, error=str(exc.__cause__ or exc))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=_error_body(exc))


@app.exception_handler(PdfGenerationException)
async def pdf_generation_exception_handler(request: Request, exc: PdfGenerationException):
    logger.error("pdf_generation_failed", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(exc, "Contract PDF could not be generated"),
    )


@app.exception_handler(UpstreamServiceException)
async def upstream_exception_handler(request: Request, exc: UpstreamServiceException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc), "code": exc.code, "key": exc.key},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("unhandled_database_error", path=request.url.path, error=str(exc))
    code = "ERROR_GENERAL_SERVER_ERROR"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error", "code": code, "key": error_key(code)},
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.APP_VERSION}


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Emlak CRM API",
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "Documentation disabled in production",
    }


# Include routers
app.include_router(owner_routes.router, prefix="/api/owners", tags=["Owners"])
app.include_router(property_routes.router, prefix="/api/properties", tags=["Properties"])
app.include_router(tenant_routes.router, prefix="/api/tenants", tags=["Tenants"])
app.include_router(contract_routes.router, prefix="/api/contracts", tags=["Contracts"])
app.include_router(meeting_routes.router, prefix="/api/meetings", tags=["Meetings"])
app.include_router(text_extraction_routes.router, prefix="/api/text-extraction", tags=["Text Extraction"])
