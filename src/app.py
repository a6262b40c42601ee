"""FastAPI 앱 팩토리"""
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from src.core.config import settings
from src.core.database import init_db
from src.core.exceptions import CatalogException
from src.core.logging import logger
from src.core.security import log_request
from src.api import health_router, product_router
from src.schemas.product_schema import ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    init_db()
    logger.info("Application started")
    yield
    logger.info("Shutting down application...")


class SPAStaticFiles(StaticFiles):
    """없는 경로는 index.html로 응답 (브라우저 클라이언트 라우팅)"""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


async def catalog_exception_handler(request: Request, exc: CatalogException) -> JSONResponse:
    """CatalogException 계열 -> 구조화된 에러 응답"""
    if exc.status_code >= 500:
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"[API] {request.method} {request.url.path} rejected: {exc.error_code}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message, error_code=exc.error_code).model_dump(exclude_none=True),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패 -> 400"""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    message = "Invalid product data" if request.method == "POST" else "Invalid request"
    logger.warning(f"[API] Input validation failed: {len(errors)} error(s)")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(message=message, error_code="VALIDATION_ERROR", errors=errors).model_dump(),
    )


def create_app(static_dir: str | None = None) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        static_dir: 정적 파일 디렉토리 (기본값: settings.static_dir)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging(request: Request, call_next):
        await log_request(request)
        return await call_next(request)

    app.add_exception_handler(CatalogException, catalog_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(product_router)

    # 정적 파일은 라우터 뒤에 마운트해야 API 경로를 가리지 않음
    static_dir = static_dir or settings.static_dir
    if os.path.isdir(static_dir):
        app.mount("/", SPAStaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory not found, skipping: {static_dir}")

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
