from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from company_settings.api.v1.router import api_router
from company_settings.core.config import settings
from company_settings.core.exceptions import SettingsAppError, StorageError, ValidationError
from company_settings.db.session import SessionLocal
from company_settings.schemas.common import ErrorResponse, FieldErrorOut
from company_settings.services.bootstrap_service import ensure_default_company


logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

STORAGE_READ_FAILURE = 'Failed to fetch company settings'
STORAGE_WRITE_FAILURE = 'Failed to update company settings'
DATABASE_FAILURE = 'Database operation failed'


@asynccontextmanager
async def lifespan(_: FastAPI):
    db = SessionLocal()
    try:
        ensure_default_company(db)
        db.commit()
    except Exception as exc:  # noqa: BLE001
        db.rollback()
        logger.warning('Bootstrap seed skipped: %s', exc)
    finally:
        db.close()

    yield


app = FastAPI(
    title='Company Settings API',
    version='0.1.0',
    openapi_url='/api/v1/openapi.json',
    docs_url='/api/v1/docs',
    redoc_url='/api/v1/redoc',
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)


@app.exception_handler(SettingsAppError)
async def settings_app_error_handler(request: Request, exc: SettingsAppError) -> JSONResponse:
    if isinstance(exc, StorageError):
        # Details stay in the log; clients get a fixed message.
        logger.error('%s %s failed: %s %s', request.method, request.url.path, exc.message, exc.details)
        message = STORAGE_READ_FAILURE if request.method == 'GET' else STORAGE_WRITE_FAILURE
        return JSONResponse(status_code=exc.status_code, content={'error': message})

    fields = None
    if isinstance(exc, ValidationError):
        fields = [FieldErrorOut(field_id=error.field_id, message=error.message) for error in exc.errors]
    body = ErrorResponse(error=exc.message, fields=fields).model_dump(by_alias=True, exclude_none=True)
    logger.info('%s %s -> %s: %s', request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # The request session is rolled back by get_db; the driver message is not returned.
    logger.error('%s %s database failure: %s', request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={'error': DATABASE_FAILURE})


@app.exception_handler(HTTPException)
async def http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={'error': str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [
        {
            'fieldId': '.'.join(str(part) for part in error['loc'] if part != 'body'),
            'message': error['msg'],
        }
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={'error': 'Invalid request body', 'fields': fields})


app.include_router(api_router, prefix='/api/v1')


@app.get('/')
def root() -> dict[str, str]:
    return {'service': 'company-settings-api', 'status': 'running'}
