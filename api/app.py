"""
FastAPI application for the quote service.
Builds the app around a single QuoteStore, registers the error mapping and
serves the static browser client from the public directory.
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from quote_store import QuoteStore, create_quote_store
from utils import (
    api_logger, config_manager, resolve_path,
    QuoteSystemError, ValidationError, NotFoundError, ErrorCodes, create_error_response
)
from .models import HealthResponse
from .routes import router
from .middleware import setup_middleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    api_logger.info(f"[API] Quote Service API started with {len(app.state.quote_store)} quotes")
    yield
    api_logger.info("[API] Shutting down Quote Service API...")


def _original_url(request: Request) -> str:
    """请求路径（含查询字符串）"""
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return path


def register_exception_handlers(app: FastAPI) -> None:
    """注册异常到HTTP响应的映射"""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        api_logger.warning(f"[API] Validation error: {exc} {exc.context}")
        return JSONResponse(status_code=400, content=create_error_response(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        api_logger.info(f"[API] Not found: {exc}")
        return JSONResponse(status_code=404, content=create_error_response(exc))

    @app.exception_handler(QuoteSystemError)
    async def system_error_handler(request: Request, exc: QuoteSystemError):
        api_logger.error(f"[API] Service error: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = ValidationError("Invalid request body", ErrorCodes.VALIDATION_INVALID_BODY)
        api_logger.warning(f"[API] {error} on {request.url.path}")
        return JSONResponse(
            status_code=400,
            content={**create_error_response(error), "details": jsonable_errors(exc)}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # 未匹配的路由和不支持的方法统一视为 404
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={"error": "Route not found", "path": _original_url(request)}
            )
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


def jsonable_errors(exc: RequestValidationError):
    """只保留可序列化的错误字段"""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def create_app(store: Optional[QuoteStore] = None, serve_static: Optional[bool] = None) -> FastAPI:
    """创建FastAPI应用；未提供存储时按配置加载数据文件"""
    app_config = config_manager.get_app_config()

    app = FastAPI(
        title="Quote Service API",
        description="Serves a collection of quotations over a JSON API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.quote_store = store if store is not None else create_quote_store()
    app.state.started_at = time.monotonic()
    app.state.environment = app_config.environment

    setup_middleware(app)
    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check(request: Request):
        """健康检查端点"""
        state = request.app.state
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "uptime": time.monotonic() - state.started_at,
            "environment": state.environment,
            "quotesLoaded": len(state.quote_store)
        }

    app.add_api_route("/health", health_check, methods=["HEAD"], include_in_schema=False,
                      response_model=HealthResponse)

    app.include_router(router, prefix="/api")

    if serve_static is None:
        serve_static = app_config.serve_static
    static_dir = resolve_path(app_config.static_dir)
    if serve_static and static_dir.is_dir():
        # 必须最后挂载，否则会遮蔽 API 路由
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    elif serve_static:
        api_logger.warning(f"[API] Static directory not found, client disabled: {static_dir}")

    return app


app = create_app()
