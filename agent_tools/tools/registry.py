"""
工具注册表

管理工具契约与实现，负责调用流水线：
输入校验 -> 执行 -> 输出校验 -> 调用日志

注册表是显式对象，由组合根（create_app / 脚本 / 测试）创建并传给各适配器，
多个注册表可以共存。
"""

import inspect
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from agent_tools.core.logging import get_logger
from agent_tools.core.observability import ToolCallLog, ToolCallLogger
from agent_tools.core.observability import log_tool_call as default_log_tool_call
from agent_tools.core.redaction import redact as default_redact
from agent_tools.tools.contracts import ToolContract, ToolImpl
from agent_tools.tools.schemas import InvokeOptions, InvokeResult, ToolMeta

logger = get_logger(__name__)

INPUT_VALIDATION_FAILED = "Input validation failed"
OUTPUT_VALIDATION_FAILED = "Output validation failed"


class ToolAlreadyRegisteredError(ValueError):
    """重复注册同名工具（配置错误）"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Tool "{name}" is already registered')


@dataclass
class RegisteredTool:
    """已注册工具：契约 + 实现"""

    contract: ToolContract
    impl: ToolImpl


def _now_ms() -> int:
    return int(time.time() * 1000)


class ToolRegistry:
    """工具注册表"""

    def __init__(
        self,
        log_tool_call: Optional[ToolCallLogger] = None,
        redact: Optional[Callable[[Any], Any]] = None,
    ):
        self._tools: Dict[str, RegisteredTool] = {}
        self._log_tool_call = log_tool_call or default_log_tool_call
        self._redact = redact or default_redact

    def register_tool(self, contract: ToolContract, impl: ToolImpl) -> None:
        """
        注册工具

        Raises:
            ToolAlreadyRegisteredError: 同名工具已注册。需要幂等注册时先调用 has_tool
        """
        if contract.name in self._tools:
            raise ToolAlreadyRegisteredError(contract.name)

        self._tools[contract.name] = RegisteredTool(contract=contract, impl=impl)

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def get_tool(self, name: str) -> Optional[RegisteredTool]:
        """获取工具，不存在时返回 None"""
        return self._tools.get(name)

    def list_tools(self) -> List[ToolMeta]:
        """列出所有工具元数据"""
        return [
            ToolMeta(name=name, description=tool.contract.description)
            for name, tool in self._tools.items()
        ]

    def tool_count(self) -> int:
        return len(self._tools)

    def clear(self) -> None:
        """清空注册表（仅用于测试隔离）"""
        self._tools.clear()

    async def invoke_tool(
        self,
        name: str,
        input: Any,
        options: Optional[InvokeOptions] = None,
    ) -> InvokeResult:
        """
        调用工具

        1. 查找工具（不存在直接返回，不记录调用日志）
        2. 校验输入
        3. 执行实现（同步或异步）
        4. 校验输出
        5. 记录调用日志并返回结果

        任何失败都转换为 InvokeResult，不向调用方抛出异常。
        """
        options = options or InvokeOptions()

        tool = self._tools.get(name)
        if not tool:
            return InvokeResult.failure(f'Tool "{name}" not found')

        started_at = _now_ms()

        try:
            # 1. 校验输入
            validated_input = input
            if not options.skip_input_validation:
                checked = tool.contract.input.validate(input)
                if not checked.ok:
                    await self._record(name, input, started_at, options, INPUT_VALIDATION_FAILED)
                    return InvokeResult.failure(INPUT_VALIDATION_FAILED, checked.issues)
                validated_input = checked.value

            # 2. 执行工具
            result = tool.impl(validated_input)
            if inspect.isawaitable(result):
                result = await result

            # 3. 校验输出
            if not options.skip_output_validation:
                checked = tool.contract.output.validate(result)
                if not checked.ok:
                    await self._record(name, input, started_at, options, OUTPUT_VALIDATION_FAILED)
                    return InvokeResult.failure(OUTPUT_VALIDATION_FAILED, checked.issues)

            await self._record(name, input, started_at, options)
            return InvokeResult.success(result)

        except Exception as e:
            error_message = str(e)
            await self._record(name, input, started_at, options, error_message)
            return InvokeResult.failure(error_message)

    async def _record(
        self,
        name: str,
        input: Any,
        started_at: int,
        options: InvokeOptions,
        error: Optional[str] = None,
    ) -> None:
        """写入调用日志，脱敏或日志收集器自身的异常不影响调用结果"""
        try:
            entry = ToolCallLog(
                name=name,
                started_at=started_at,
                finished_at=_now_ms(),
                args=self._redact(input),
                error=error,
                trace_id=options.trace_id,
            )
            await self._log_tool_call(entry)
        except Exception as e:
            logger.error(
                "tool_call_log_failed",
                tool_name=name,
                trace_id=options.trace_id,
                error=str(e),
            )
