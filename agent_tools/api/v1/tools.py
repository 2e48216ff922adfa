"""
工具服务 API

HTTP Tool Server 接口：
- GET  /tools: 返回工具元数据（MCP 格式）
- POST /tools/{name}: 执行工具调用
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Header

from agent_tools.api.deps import Registry
from agent_tools.core.logging import get_logger
from agent_tools.mcp import to_mcp_endpoints
from agent_tools.tools.schemas import InvokeOptions, ToolInvokeRequest, ToolListResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=ToolListResponse)
async def list_tools(
    registry: Registry,
    x_trace_id: Optional[str] = Header(None, alias="X-Trace-ID"),
) -> ToolListResponse:
    """
    获取可用工具列表

    返回所有注册工具的名称、描述与输入 JSON Schema
    """
    tools = to_mcp_endpoints(registry, trace_id=x_trace_id).list_tools()

    logger.info("tools_list_request", trace_id=x_trace_id, count=len(tools))

    return ToolListResponse(tools=tools, total=len(tools))


@router.post("/{name:path}")
async def call_tool(
    name: str,
    request: ToolInvokeRequest,
    registry: Registry,
    x_trace_id: Optional[str] = Header(None, alias="X-Trace-ID"),
) -> Dict[str, Any]:
    """
    执行工具调用

    输入：{"input": <json>}
    输出：
    - ok: 是否成功
    - result: 工具输出（成功时）
    - error: 错误信息（失败时）
    - validation_errors: 字段级校验问题（校验失败时）

    工具层面的失败同样返回 200，由 ok 字段区分
    """
    log = logger.bind(trace_id=x_trace_id, tool_name=name)
    log.info("tool_call_request")

    result = await registry.invoke_tool(
        name,
        request.input,
        InvokeOptions(trace_id=x_trace_id),
    )

    if not result.ok:
        log.warning("tool_call_failed", error=result.error)

    return result.to_wire()
