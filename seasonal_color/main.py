"""
FastAPI 应用入口
================

应用启动流程:
1. 创建 FastAPI 实例
2. 配置 CORS 中间件
3. 构建色板注册表（数据错误在此直接失败）
4. 注册 API 路由

运行方式:
    uvicorn seasonal_color.main:app --reload --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
import sys
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from seasonal_color.api import color, health, season
from seasonal_color.config.settings import settings
from seasonal_color.service.palette.registry import get_palette_registry


def _configure_logging() -> None:
    """配置日志系统"""
    log_format = (
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    # force=True 强制重新配置，覆盖 uvicorn 的默认配置
    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    logging.getLogger("seasonal_color").setLevel(level)

    # 配置 uvicorn 的访问日志
    uvicorn_access_logger = logging.getLogger("uvicorn.access")
    uvicorn_access_logger.setLevel(logging.INFO)
    if not uvicorn_access_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))
        uvicorn_access_logger.addHandler(handler)

    # 降低第三方库的日志级别
    for lib_name in ["httpx", "httpcore", "multipart"]:
        logging.getLogger(lib_name).setLevel(logging.WARNING)

    logging.info("日志系统初始化完成")


# 初始化日志配置（模块加载时执行）
_configure_logging()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """请求日志中间件 - 记录每个 HTTP 请求"""

    def __init__(self, app):
        super().__init__(app)
        self.logger = logging.getLogger("seasonal_color.access")

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        self.logger.info(">>> 收到请求: %s %s", request.method, request.url.path)

        response = await call_next(request)

        duration = time.time() - start_time
        self.logger.info(
            "<<< 请求完成: %s %s -> %d (耗时: %.3fs)",
            request.method,
            request.url.path,
            response.status_code,
            duration,
        )

        return response


def create_app() -> FastAPI:
    """创建并配置 FastAPI 应用实例"""

    # 色板是静态配置，构建失败时直接中止启动
    registry = get_palette_registry()

    app = FastAPI(
        title=settings.APP_NAME,
        description="服装颜色季型分类服务（CIEDE2000 + 12 细分季型色板）",
        version=settings.APP_VERSION,
    )
    app.state.palette_registry = registry

    _configure_cors(app)

    app.add_middleware(RequestLoggingMiddleware)

    _register_routes(app)

    return app


def _configure_cors(app: FastAPI) -> None:
    """配置跨域资源共享 (CORS)"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_routes(app: FastAPI) -> None:
    """注册 API 路由"""
    app.include_router(color.router, prefix="/api", tags=["颜色"])
    app.include_router(season.router, prefix="/api", tags=["季型"])
    app.include_router(health.router, tags=["系统"])

    @app.get("/", tags=["系统"])
    async def root() -> dict[str, str]:
        """根路径，返回欢迎信息"""
        return {"message": f"Welcome to {settings.APP_NAME}"}


# 创建应用实例
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "seasonal_color.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,  # 使用我们自定义的日志配置
        access_log=True,
    )
