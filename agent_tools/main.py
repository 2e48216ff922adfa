"""
Agent Tools - Tool Server 主入口

职责:
- 组合根：创建工具注册表并注册内置工具
- 通过 /api/tools 暴露工具列表与调用接口
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agent_tools import __version__
from agent_tools.api import router as api_router
from agent_tools.core.config import settings
from agent_tools.core.logging import setup_logging
from agent_tools.tools.builtin import register_builtin_tools
from agent_tools.tools.registry import ToolRegistry


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理"""
    setup_logging()
    yield


def create_app(registry: Optional[ToolRegistry] = None) -> FastAPI:
    """
    创建 FastAPI 应用实例

    Args:
        registry: 工具注册表，未提供时创建一个并注册内置工具
    """
    if registry is None:
        registry = ToolRegistry()
        register_builtin_tools(registry)

    app = FastAPI(
        title="Agent Tools - Tool Server",
        description="类型化工具注册表：schema 校验、调用日志、MCP / HTTP 适配",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.tool_registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check() -> dict:
        """健康检查端点"""
        return {"status": "healthy", "service": settings.SERVICE_NAME, "version": __version__}

    return app


app = create_app()
