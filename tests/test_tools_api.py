"""
Tool Server API 测试

使用 httpx.ASGITransport 直接调用 FastAPI 应用
"""

import httpx
import pytest
import pytest_asyncio
from pydantic import BaseModel

from agent_tools.main import create_app
from agent_tools.tools.client import build_http_client
from agent_tools.tools.contracts import define_contract


@pytest.fixture
def app(registry):
    return create_app(registry)


@pytest_asyncio.fixture
async def api_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


class TestListToolsEndpoint:
    """GET /api/tools"""

    @pytest.mark.asyncio
    async def test_list_tools(self, api_client):
        response = await api_client.get("/api/tools")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        names = sorted(t["name"] for t in data["tools"])
        assert names == ["echo", "math.add"]
        for tool in data["tools"]:
            assert tool["input_schema"]["type"] == "object"


class TestCallToolEndpoint:
    """POST /api/tools/{name}"""

    @pytest.mark.asyncio
    async def test_echo(self, api_client):
        response = await api_client.post(
            "/api/tools/echo",
            json={"input": {"text": "hello", "transform": "uppercase"}},
        )

        assert response.status_code == 200
        assert response.json() == {"ok": True, "result": {"text": "HELLO"}}

    @pytest.mark.asyncio
    async def test_math_add(self, api_client):
        response = await api_client.post("/api/tools/math.add", json={"input": {"a": 1.5, "b": 2}})

        assert response.json() == {"ok": True, "result": {"sum": 3.5}}

    @pytest.mark.asyncio
    async def test_validation_errors(self, api_client):
        response = await api_client.post("/api/tools/math.add", json={"input": {"a": "five", "b": 3}})

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is False
        assert data["error"] == "Input validation failed"
        assert data["validation_errors"][0]["path"] == ["a"]

    @pytest.mark.asyncio
    async def test_unknown_tool(self, api_client):
        response = await api_client.post("/api/tools/unknown.tool", json={"input": {}})

        assert response.status_code == 200
        assert response.json() == {"ok": False, "error": 'Tool "unknown.tool" not found'}

    @pytest.mark.asyncio
    async def test_missing_input_is_none(self, api_client):
        """请求体缺少 input 时以 None 调用工具"""
        response = await api_client.post("/api/tools/echo", json={})

        data = response.json()
        assert data["ok"] is False
        assert data["error"] == "Input validation failed"

    @pytest.mark.asyncio
    async def test_name_with_slash(self, registry, api_client):
        class PathInput(BaseModel):
            path: str

        registry.register_tool(
            define_contract(name="files/stat", input=PathInput, output=dict),
            lambda input: {"path": input.path, "size": 0},
        )

        response = await api_client.post("/api/tools/files/stat", json={"input": {"path": "/tmp/a"}})

        assert response.json() == {"ok": True, "result": {"path": "/tmp/a", "size": 0}}

    @pytest.mark.asyncio
    async def test_trace_id_header(self, api_client, call_logs):
        await api_client.post(
            "/api/tools/echo",
            json={"input": {"text": "traced"}},
            headers={"X-Trace-ID": "trace-api-001"},
        )

        assert call_logs.entries[0].trace_id == "trace-api-001"


class TestHealth:
    """健康检查"""

    @pytest.mark.asyncio
    async def test_health(self, api_client):
        response = await api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "agent-tools"


class TestHttpClientRoundTrip:
    """HttpToolClient 对接真实 Tool Server"""

    @pytest.mark.asyncio
    async def test_call_and_list(self, app, call_logs):
        client = build_http_client(
            "http://testserver",
            trace_id="trace-roundtrip",
            transport=httpx.ASGITransport(app=app),
        )

        tools = await client.list_tools()
        echoed = await client.call_tool("echo", {"text": "round trip", "transform": "reverse"})
        failed = await client.call_tool("math.add", {"a": "x", "b": 1})

        assert sorted(t["name"] for t in tools) == ["echo", "math.add"]
        assert echoed.ok is True
        assert echoed.result == {"text": "pirt dnuor"}
        assert failed.ok is False
        assert failed.validation_errors[0].path == ["a"]
        assert {e.trace_id for e in call_logs.entries} == {"trace-roundtrip"}
