"""
工具服务 Schema 定义

调用结果、校验问题、调用日志等数据结构统一通过 Pydantic v2 定义。
InvokeResult 只有一种内部表示，本地（camelCase）与线上（snake_case）
两种视图在边界处转换。
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_jsonable_python


class ValidationIssue(BaseModel):
    """单个字段的校验问题"""

    path: List[Union[str, int]] = Field(default_factory=list, description="字段路径（属性名 / 数组下标）")
    message: str = Field(..., description="可读的错误描述")


class InvokeOptions(BaseModel):
    """工具调用选项"""

    trace_id: Optional[str] = Field(None, description="追踪 ID，仅透传给日志")
    skip_input_validation: bool = Field(False, description="跳过输入校验（不推荐）")
    skip_output_validation: bool = Field(False, description="跳过输出校验（不推荐）")


class InvokeResult(BaseModel):
    """
    工具调用结果

    ok=True 时携带 result；ok=False 时携带 error，
    校验失败时额外携带 validation_errors。
    """

    model_config = ConfigDict(populate_by_name=True)

    ok: bool
    result: Any = None
    error: Optional[str] = None
    validation_errors: Optional[List[ValidationIssue]] = Field(None, alias="validationErrors")

    @classmethod
    def success(cls, result: Any) -> "InvokeResult":
        return cls(ok=True, result=result)

    @classmethod
    def failure(
        cls,
        error: str,
        validation_errors: Optional[List[ValidationIssue]] = None,
    ) -> "InvokeResult":
        return cls(ok=False, error=error, validation_errors=validation_errors)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "InvokeResult":
        """从 HTTP / MCP 响应体构建结果，缺少 ok 字段时视为失败"""
        if isinstance(data, dict) and "ok" not in data:
            data = {"ok": False, **data}
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """本地视图（camelCase），result 保持实现函数的原始返回值"""
        if self.ok:
            return {"ok": True, "result": self.result}

        data: Dict[str, Any] = {"ok": False, "error": self.error}
        if self.validation_errors is not None:
            data["validationErrors"] = [issue.model_dump() for issue in self.validation_errors]
        return data

    def to_wire(self) -> Dict[str, Any]:
        """线上视图（snake_case），可直接 JSON 序列化"""
        if self.ok:
            return {"ok": True, "result": to_jsonable_python(self.result)}

        data: Dict[str, Any] = {"ok": False, "error": self.error}
        issues = [
            {
                "path": [p for p in issue.path if isinstance(p, (str, int))],
                "message": issue.message,
            }
            for issue in self.validation_errors or []
        ]
        if issues:
            data["validation_errors"] = issues
        return data


class ToolMeta(BaseModel):
    """工具元数据（列表用）"""

    name: str
    description: Optional[str] = None


class ToolInvokeRequest(BaseModel):
    """HTTP 工具调用请求体"""

    input: Any = Field(None, description="工具输入参数（JSON）")


class ToolListResponse(BaseModel):
    """HTTP 工具列表响应"""

    tools: List[Dict[str, Any]]
    total: int
