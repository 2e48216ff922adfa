"""
工具调用可观测性

每次工具调用输出一条结构化日志（span=tool.call），
包含耗时、状态、脱敏后的参数样本与 trace_id。
"""

from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel

from agent_tools.core.config import settings
from agent_tools.core.logging import get_logger

logger = get_logger(__name__)


class ToolCallLog(BaseModel):
    """
    工具调用日志

    started_at / finished_at 为毫秒级 epoch 时间戳
    """

    name: str
    started_at: int
    finished_at: int
    args: Any = None
    error: Optional[str] = None
    trace_id: Optional[str] = None

    @property
    def duration_ms(self) -> int:
        return self.finished_at - self.started_at

    @property
    def status(self) -> str:
        return "error" if self.error else "ok"


# 日志收集器签名：接收一条调用记录，可被 await
ToolCallLogger = Callable[[ToolCallLog], Awaitable[None]]


async def log_tool_call(entry: ToolCallLog) -> None:
    """记录一次工具调用"""
    fields = {
        "span": "tool.call",
        "tool_name": entry.name,
        "duration_ms": entry.duration_ms,
        "status": entry.status,
    }

    if settings.TOOLS_LOG_ARGS and entry.args is not None:
        fields["args_sample"] = entry.args

    log = logger.bind(trace_id=entry.trace_id) if entry.trace_id else logger

    if entry.error:
        log.warning("tool_call", error=entry.error, **fields)
    else:
        log.info("tool_call", **fields)
