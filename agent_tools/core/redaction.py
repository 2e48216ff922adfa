"""
日志脱敏

在记录工具调用参数前，屏蔽邮箱、电话号码以及疑似密钥的长字符串。
规则为简单正则匹配，不做语义识别。
"""

import re
from typing import Any

from pydantic import BaseModel

# 邮箱：word@word.word
EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# 电话：123-456-7890、(123) 456-7890、+1 234 567 8901 等常见格式
PHONE_PATTERN = re.compile(r"(?:\+?1[-.\s]?)?(?:\(?\d{3}\)?[-.\s]?)?\d{3}[-.\s]?\d{4}\b")

# 32 位以上的字母数字串，视为 token / 密钥
SECRET_PATTERN = re.compile(r"\b[A-Za-z0-9]{32,}\b")

REDACTED_EMAIL = "[REDACTED_EMAIL]"
REDACTED_PHONE = "[REDACTED_PHONE]"
REDACTED_SECRET = "[REDACTED_SECRET]"


def redact_string(value: str) -> str:
    """屏蔽字符串中的敏感片段"""
    value = EMAIL_PATTERN.sub(REDACTED_EMAIL, value)
    value = PHONE_PATTERN.sub(REDACTED_PHONE, value)
    return SECRET_PATTERN.sub(REDACTED_SECRET, value)


def redact(value: Any) -> Any:
    """
    递归脱敏任意输入

    返回脱敏后的副本，不修改原对象。
    无法序列化的对象（函数、任意类实例等）返回 None。
    """
    if value is None:
        return None

    if isinstance(value, str):
        return redact_string(value)

    # bool 是 int 的子类，一并原样返回
    if isinstance(value, (int, float)):
        return value

    if isinstance(value, BaseModel):
        return redact(value.model_dump())

    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact(item) for item in value]

    if isinstance(value, dict):
        return {str(key): redact(item) for key, item in value.items()}

    return None
