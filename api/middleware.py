"""
Middleware for the quote service API.
Provides CORS, request logging, last-resort error handling and security headers.
"""

import time
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from utils import api_logger, config_manager


class LoggingMiddleware(BaseHTTPMiddleware):
    """日志中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"

        api_logger.debug(f"[API] {request.method} {request.url.path} from {client_ip}")

        response = await call_next(request)

        process_time = time.time() - start_time
        api_logger.info(f"[API] {request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")

        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """错误处理中间件，兜底未被异常处理器接管的错误"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except Exception as e:
            api_logger.error(f"[API] Unexpected error on {request.method} {request.url.path}: {str(e)}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"error": "Internal Server Error"}
            )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """安全头中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


def setup_cors(app):
    """设置CORS"""
    api_config = config_manager.get_api_config()
    cors_origins = api_config.cors_origins

    if "*" in cors_origins and config_manager.get_app_config().environment == 'production':
        api_logger.warning("[CORS] Using wildcard origin in production")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def setup_middleware(app):
    """设置所有中间件"""
    setup_cors(app)

    # 后添加的中间件在外层
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware)

    api_logger.info("[API] Middleware setup completed")
