"""
Tool Client

通过 HTTP 调用远端 Tool Server：
- POST {base_url}/api/tools/{name}：调用工具
- GET  {base_url}/api/tools：获取工具列表
"""

import asyncio
import uuid
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from agent_tools.core.config import settings
from agent_tools.core.logging import get_logger
from agent_tools.tools.schemas import InvokeResult

logger = get_logger(__name__)


class ToolClientError(Exception):
    """Tool 客户端错误"""

    def __init__(self, message: str, error_code: str = "CLIENT_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class HttpToolClient:
    """
    HTTP 工具客户端

    call_tool 从不抛异常，所有失败编码在 InvokeResult 中；
    list_tools 在 HTTP 错误 / 超时时抛出 ToolClientError。
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout_ms: Optional[int] = None,
        trace_id: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms if timeout_ms is not None else settings.TOOLS_TIMEOUT_MS
        self.trace_id = trace_id
        self._transport = transport

        self.headers: Dict[str, str] = {"Content-Type": "application/json", **(headers or {})}
        if trace_id:
            self.headers["X-Trace-ID"] = trace_id

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_ms / 1000,
            headers=self.headers,
            transport=self._transport,
        )

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """发送请求，timeout_ms 作为整个请求的截止时间"""
        async with self._client() as client:
            return await asyncio.wait_for(
                client.request(method, url, **kwargs),
                timeout=self.timeout_ms / 1000,
            )

    def _timeout_message(self) -> str:
        return f"Request timeout after {self.timeout_ms}ms"

    async def call_tool(self, name: str, input: Any) -> InvokeResult:
        """调用工具"""
        url = f"{self.base_url}/api/tools/{quote(name, safe='')}"
        log = logger.bind(trace_id=self.trace_id, tool_name=name)

        try:
            response = await self._send("POST", url, json={"input": input})

            data = response.json()

            if response.is_error and not (isinstance(data, dict) and data.get("error")):
                log.warning("tool_call_http_error", status_code=response.status_code)
                return InvokeResult.failure(
                    f"HTTP {response.status_code}: {response.reason_phrase}"
                )

            result = InvokeResult.from_wire(data)
            if not result.ok:
                log.warning("tool_call_failed", error=result.error)
            return result

        except (httpx.TimeoutException, asyncio.TimeoutError):
            log.error("tool_call_timeout", timeout_ms=self.timeout_ms)
            return InvokeResult.failure(self._timeout_message())

        except Exception as e:
            log.error("tool_call_error", error=str(e))
            return InvokeResult.failure(str(e))

    async def list_tools(self) -> List[Dict[str, Any]]:
        """
        获取远端工具列表

        Raises:
            ToolClientError: HTTP 错误或请求超时
            httpx.HTTPError: 其他网络错误
        """
        url = f"{self.base_url}/api/tools"
        log = logger.bind(trace_id=self.trace_id)

        try:
            response = await self._send("GET", url)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            log.error("tools_list_timeout", timeout_ms=self.timeout_ms)
            raise ToolClientError(self._timeout_message(), error_code="TIMEOUT") from e

        if response.is_error:
            log.error("tools_list_error", status_code=response.status_code)
            raise ToolClientError(
                f"HTTP {response.status_code}: {response.reason_phrase}",
                error_code="LIST_TOOLS_FAILED",
            )

        data = response.json()
        tools = data.get("tools") or []
        log.info("tools_list_success", count=len(tools))
        return tools


def generate_trace_id() -> str:
    """生成 trace_id"""
    return f"trace-{uuid.uuid4().hex[:16]}"


def build_http_client(
    base_url: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout_ms: Optional[int] = None,
    trace_id: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> HttpToolClient:
    """构建 HTTP 工具客户端，base_url 默认取 settings.TOOLS_BASE_URL"""
    return HttpToolClient(
        base_url=base_url or settings.TOOLS_BASE_URL,
        headers=headers,
        timeout_ms=timeout_ms,
        trace_id=trace_id,
        transport=transport,
    )
