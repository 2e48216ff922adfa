#!/usr/bin/env python3
"""
工具注册表演示脚本

演示注册表、MCP 适配器与 HTTP 客户端的基本用法

用法:
    python scripts/tool_registry_demo.py
    python scripts/tool_registry_demo.py --base-url http://localhost:8000
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Optional

from agent_tools.core.logging import setup_logging
from agent_tools.mcp import to_mcp_endpoints
from agent_tools.tools import ToolRegistry, build_http_client, generate_trace_id
from agent_tools.tools.builtin import register_builtin_tools


def dump(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


async def run_local(trace_id: str) -> None:
    """进程内调用：注册表 + MCP 适配器"""
    registry = ToolRegistry()
    register_builtin_tools(registry)

    print("=== Tool Registry Demo ===\n")

    # 1. 注册表列出工具
    print("1. Registered tools:")
    for meta in registry.list_tools():
        print(f"   - {meta.name}: {meta.description or '(no description)'}")
    print()

    # 2. MCP 适配器列出工具
    mcp = to_mcp_endpoints(registry, trace_id=trace_id)
    print("2. Tools via MCP adapter (list_tools):")
    for tool in mcp.list_tools():
        print(f"   - {tool['name']}:")
        print(f"     input_schema: {dump(tool['input_schema'])}")
    print()

    # 3. 直接调用
    print("3. Invoke tools via registry (invoke_tool):")
    for name, payload in [
        ("echo", {"text": "Hello, World!"}),
        ("echo", {"text": "hello", "transform": "uppercase"}),
        ("math.add", {"a": 5, "b": 3}),
    ]:
        result = await registry.invoke_tool(name, payload)
        print(f"   {name}({dump(payload)}): {dump(result.to_wire())}")
    print()

    # 4. MCP 调用
    print("4. Invoke tools via MCP adapter (call_tool):")
    print(f"   {dump(await mcp.call_tool('echo', {'text': 'MCP test'}))}")
    print(f"   {dump(await mcp.call_tool('math.add', {'a': 10, 'b': 20}))}")
    print()

    # 5. 校验失败 / 未知工具
    print("5. Validation error example:")
    print(f"   {dump(await mcp.call_tool('math.add', {'a': 'not a number', 'b': 5}))}")
    print()
    print("6. Unknown tool example:")
    print(f"   {dump((await registry.invoke_tool('unknown.tool', {'foo': 'bar'})).to_dict())}")


async def run_remote(base_url: str, trace_id: str) -> bool:
    """远程调用：HTTP 客户端"""
    client = build_http_client(base_url, trace_id=trace_id)

    print(f"=== Remote Tool Server: {base_url} ===\n")

    try:
        tools = await client.list_tools()
    except Exception as e:
        print(f"❌ list_tools failed: {e}")
        return False

    print(f"Available tools ({len(tools)}):")
    for tool in tools:
        print(f"   - {tool['name']}: {tool.get('description') or '(no description)'}")
    print()

    result = await client.call_tool("echo", {"text": "hello", "transform": "reverse"})
    print(f"echo(reverse): {dump(result.to_wire())}")

    result = await client.call_tool("math.add", {"a": 5, "b": 3})
    print(f"math.add(5, 3): {dump(result.to_wire())}")

    return result.ok


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="工具注册表演示")
    parser.add_argument("--base-url", help="远端 Tool Server 地址（不提供则在进程内演示）")
    parser.add_argument("--trace-id", help="追踪 ID（默认自动生成）")
    args = parser.parse_args(argv)

    setup_logging()
    trace_id = args.trace_id or generate_trace_id()

    if args.base_url:
        ok = asyncio.run(run_remote(args.base_url, trace_id))
        return 0 if ok else 1

    asyncio.run(run_local(trace_id))
    return 0


if __name__ == "__main__":
    sys.exit(main())
