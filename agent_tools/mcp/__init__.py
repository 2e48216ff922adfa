"""
MCP (Model Context Protocol) 模块

以 MCP 形式暴露工具注册表
"""

from agent_tools.mcp.adapter import McpEndpoints, McpToolInfo, get_tool_info, to_mcp_endpoints

__all__ = [
    "McpEndpoints",
    "McpToolInfo",
    "get_tool_info",
    "to_mcp_endpoints",
]
