"""
内置工具

确定性的演示 / 测试工具：echo、math.add
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from agent_tools.tools.contracts import define_contract
from agent_tools.tools.registry import ToolRegistry

EchoTransform = Literal["none", "uppercase", "lowercase", "reverse"]

# JSON 数字：接受 int / float，拒绝数字字符串与布尔值
Number = Annotated[float, Field(strict=True)]


# ============================================================
# echo
# ============================================================


class EchoInput(BaseModel):
    """echo 输入"""

    text: str = Field(..., description="要回显的文本")
    transform: EchoTransform = Field("none", description="可选的变换方式")


class EchoOutput(BaseModel):
    """echo 输出"""

    text: str


echo_contract = define_contract(
    name="echo",
    description="Echo input text back, optionally transforming it",
    input=EchoInput,
    output=EchoOutput,
)


def echo_impl(input: EchoInput) -> EchoOutput:
    """回显文本，按 transform 变换"""
    text = input.text

    if input.transform == "uppercase":
        text = text.upper()
    elif input.transform == "lowercase":
        text = text.lower()
    elif input.transform == "reverse":
        text = text[::-1]

    return EchoOutput(text=text)


# ============================================================
# math.add
# ============================================================


class MathAddInput(BaseModel):
    """math.add 输入"""

    a: Number
    b: Number


class MathAddOutput(BaseModel):
    """math.add 输出"""

    sum: float


math_add_contract = define_contract(
    name="math.add",
    description="Add two numbers together",
    input=MathAddInput,
    output=MathAddOutput,
)


def math_add_impl(input: MathAddInput) -> MathAddOutput:
    return MathAddOutput(sum=input.a + input.b)


def register_builtin_tools(registry: ToolRegistry) -> None:
    """注册内置工具，可重复调用（已注册的跳过）"""
    if not registry.has_tool(echo_contract.name):
        registry.register_tool(echo_contract, echo_impl)

    if not registry.has_tool(math_add_contract.name):
        registry.register_tool(math_add_contract, math_add_impl)
