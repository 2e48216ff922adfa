"""
工具契约

定义工具的名称、描述与输入输出 schema。契约是纯数据：
实现进程、文档与客户端生成工具都可以共享，而不依赖注册表。

schema 通过一个很小的能力接口（Schema）抽象：
- validate(value) -> SchemaValidation：校验并返回解析后的值或问题列表
- describe() -> dict：JSON Schema 描述

Pydantic 模型 / 类型由 PydanticSchema 适配，其他校验库实现同样两个方法即可接入。
"""

from dataclasses import dataclass, field
from typing import (
    Annotated,
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

from pydantic import BaseModel, BeforeValidator, Field, TypeAdapter, ValidationError

from agent_tools.tools.schemas import ValidationIssue


# ============================================================
# Schema 能力接口
# ============================================================


@dataclass
class SchemaValidation:
    """校验结果：ok 时携带 value，否则携带 issues"""

    ok: bool
    value: Any = None
    issues: List[ValidationIssue] = field(default_factory=list)


@runtime_checkable
class Schema(Protocol):
    """schema 能力接口"""

    def validate(self, value: Any) -> SchemaValidation: ...

    def describe(self) -> Dict[str, Any]: ...


class PydanticSchema:
    """基于 Pydantic TypeAdapter 的 Schema 实现，支持模型与任意类型注解"""

    def __init__(self, type_: Any):
        self.type_ = type_
        self._adapter: TypeAdapter = TypeAdapter(type_)

    def validate(self, value: Any) -> SchemaValidation:
        try:
            parsed = self._adapter.validate_python(value)
        except ValidationError as e:
            issues = [
                ValidationIssue(path=list(err["loc"]), message=err["msg"])
                for err in e.errors(include_url=False)
            ]
            return SchemaValidation(ok=False, issues=issues)
        return SchemaValidation(ok=True, value=parsed)

    def describe(self) -> Dict[str, Any]:
        return self._adapter.json_schema()

    def __repr__(self) -> str:
        return f"PydanticSchema({getattr(self.type_, '__name__', self.type_)!r})"


def as_schema(schema: Any) -> Schema:
    """将 Pydantic 模型 / 类型注解包装为 Schema，已实现接口的对象原样返回"""
    if isinstance(schema, Schema):
        return schema
    return PydanticSchema(schema)


# ============================================================
# 契约定义
# ============================================================

# 工具实现：input -> output，可同步可异步
ToolImpl = Callable[[Any], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class ToolContract:
    """工具契约（不可变）"""

    name: str
    input: Schema
    output: Schema
    description: Optional[str] = None


def define_contract(
    name: str,
    input: Any,
    output: Any,
    description: Optional[str] = None,
) -> ToolContract:
    """
    定义工具契约

    Args:
        name: 全局唯一的工具名（如 "echo"、"math.add"、"rag.query"）
        input: 输入 schema（Pydantic 模型 / 类型注解 / Schema 实现）
        output: 输出 schema
        description: 可读描述

    Returns:
        ToolContract，不做任何校验，不会失败
    """
    return ToolContract(
        name=name,
        description=description,
        input=as_schema(input),
        output=as_schema(output),
    )


def to_json_schema(schema: Any) -> Dict[str, Any]:
    """
    将 schema 转换为 JSON Schema 描述（供 MCP 适配器与外部工具发现使用）

    纯结构转换，不做语义校验；同一 schema 总是得到相同结果
    """
    return as_schema(schema).describe()


# ============================================================
# 常用字段类型
# ============================================================


def _whole_number(value: Any) -> Any:
    """整数值的浮点数（如 JSON 中的 3.0）转为 int，其余输入原样交给严格校验"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, Field(gt=0, strict=True), BeforeValidator(_whole_number)]
NonNegativeInt = Annotated[int, Field(ge=0, strict=True), BeforeValidator(_whole_number)]
SafeJson = Any
OptionalStr = Annotated[str, Field(default="")]


# ============================================================
# RAG 检索契约（占位，暂无实现）
# ============================================================


class RagChunk(BaseModel):
    """检索片段"""

    id: str
    text: str
    score: float
    metadata: Optional[Dict[str, Any]] = None


class RagQueryInput(BaseModel):
    """rag.query 输入"""

    query: NonEmptyStr
    k: PositiveInt


class RagQueryOutput(BaseModel):
    """rag.query 输出，按相关度排序"""

    chunks: List[RagChunk]


rag_query_contract = define_contract(
    name="rag.query",
    description="Query the RAG vector store for relevant document chunks",
    input=RagQueryInput,
    output=RagQueryOutput,
)
