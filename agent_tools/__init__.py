"""
Agent Tools - 类型化工具注册表与调用流水线
"""

__version__ = "0.1.0"
