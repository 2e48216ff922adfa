"""
核心基础设施：配置、日志、脱敏、可观测性
"""
