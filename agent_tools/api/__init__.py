"""
API 路由模块

统一注册所有 API 路由
"""

from fastapi import APIRouter

from agent_tools.api.v1 import tools

router = APIRouter()

# 工具服务
router.include_router(tools.router, prefix="/tools", tags=["工具"])
