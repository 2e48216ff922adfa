"""
MCP 适配器

以 MCP 的 list_tools / call_tool 形式暴露工具注册表。
只返回普通的内存数据结构，不绑定任何传输层（HTTP、WebSocket、stdio 均可在外层包装）。
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from agent_tools.tools.contracts import to_json_schema
from agent_tools.tools.registry import RegisteredTool, ToolRegistry
from agent_tools.tools.schemas import InvokeOptions


@dataclass
class McpToolInfo:
    """MCP 工具信息"""

    name: str
    description: Optional[str]
    input_schema: Dict[str, Any]

    @classmethod
    def from_tool(cls, tool: RegisteredTool) -> "McpToolInfo":
        return cls(
            name=tool.contract.name,
            description=tool.contract.description,
            input_schema=to_json_schema(tool.contract.input),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


class McpEndpoints:
    """MCP 端点：tools/list 与 tools/call"""

    def __init__(self, registry: ToolRegistry, trace_id: Optional[str] = None):
        self.registry = registry
        self.trace_id = trace_id

    def list_tools(self) -> List[Dict[str, Any]]:
        """列出所有工具及其输入 schema"""
        tools = []
        for meta in self.registry.list_tools():
            tool = self.registry.get_tool(meta.name)
            if tool:
                tools.append(McpToolInfo.from_tool(tool).to_dict())
        return tools

    async def call_tool(self, name: str, input: Any) -> Dict[str, Any]:
        """
        调用工具

        成功：{"ok": True, "result": ...}
        失败：{"ok": False, "error": ..., "validation_errors": [...]}（仅在有校验问题时包含）
        """
        result = await self.registry.invoke_tool(
            name,
            input,
            InvokeOptions(trace_id=self.trace_id),
        )
        return result.to_wire()


def to_mcp_endpoints(registry: ToolRegistry, trace_id: Optional[str] = None) -> McpEndpoints:
    """基于注册表创建 MCP 端点"""
    return McpEndpoints(registry, trace_id=trace_id)


def get_tool_info(registry: ToolRegistry, name: str) -> Optional[Dict[str, Any]]:
    """获取单个工具的 MCP 信息，不存在时返回 None"""
    tool = registry.get_tool(name)
    if not tool:
        return None
    return McpToolInfo.from_tool(tool).to_dict()
