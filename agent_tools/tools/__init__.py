"""
工具模块

提供 Provider 无关的类型化工具系统：
- 基于 Pydantic 的工具契约
- 带输入输出校验与调用日志的注册表
- HTTP 客户端，远程调用 Tool Server

所有工具调用：
- 输入输出通过 schema 校验
- 参数脱敏后写入调用日志
- 失败统一以 InvokeResult 返回
"""

from agent_tools.tools.schemas import (
    InvokeOptions,
    InvokeResult,
    ToolMeta,
    ValidationIssue,
)
from agent_tools.core.observability import ToolCallLog
from agent_tools.tools.contracts import (
    NonEmptyStr,
    NonNegativeInt,
    OptionalStr,
    PositiveInt,
    PydanticSchema,
    RagChunk,
    RagQueryInput,
    RagQueryOutput,
    SafeJson,
    Schema,
    SchemaValidation,
    ToolContract,
    ToolImpl,
    as_schema,
    define_contract,
    rag_query_contract,
    to_json_schema,
)
from agent_tools.tools.registry import RegisteredTool, ToolAlreadyRegisteredError, ToolRegistry
from agent_tools.tools.client import (
    HttpToolClient,
    ToolClientError,
    build_http_client,
    generate_trace_id,
)

__all__ = [
    # Schemas
    "InvokeOptions",
    "InvokeResult",
    "ToolCallLog",
    "ToolMeta",
    "ValidationIssue",
    # 契约
    "NonEmptyStr",
    "NonNegativeInt",
    "OptionalStr",
    "PositiveInt",
    "PydanticSchema",
    "RagChunk",
    "RagQueryInput",
    "RagQueryOutput",
    "SafeJson",
    "Schema",
    "SchemaValidation",
    "ToolContract",
    "ToolImpl",
    "as_schema",
    "define_contract",
    "rag_query_contract",
    "to_json_schema",
    # 注册表
    "RegisteredTool",
    "ToolAlreadyRegisteredError",
    "ToolRegistry",
    # HTTP 客户端
    "HttpToolClient",
    "ToolClientError",
    "build_http_client",
    "generate_trace_id",
]
