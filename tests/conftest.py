"""
测试配置和 fixtures
"""

from typing import List

import pytest

from agent_tools.core.observability import ToolCallLog
from agent_tools.tools.builtin import register_builtin_tools
from agent_tools.tools.registry import ToolRegistry


class RecordingLogger:
    """记录调用日志的收集器，替代 structlog 输出"""

    def __init__(self):
        self.entries: List[ToolCallLog] = []

    async def __call__(self, entry: ToolCallLog) -> None:
        self.entries.append(entry)


@pytest.fixture
def call_logs() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def registry(call_logs: RecordingLogger):
    """注册了内置工具的独立注册表"""
    registry = ToolRegistry(log_tool_call=call_logs)
    register_builtin_tools(registry)
    yield registry
    registry.clear()
