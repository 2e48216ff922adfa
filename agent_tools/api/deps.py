"""
API 依赖注入
"""

from typing import Annotated

from fastapi import Depends, Request

from agent_tools.tools.registry import ToolRegistry


def get_tool_registry(request: Request) -> ToolRegistry:
    """获取应用持有的工具注册表"""
    return request.app.state.tool_registry


Registry = Annotated[ToolRegistry, Depends(get_tool_registry)]
