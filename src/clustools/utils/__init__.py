"""通用工具模块

此包包含项目中使用的通用工具函数:
- logging: 结构化日志配置
"""

from clustools.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
