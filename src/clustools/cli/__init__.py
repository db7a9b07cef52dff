"""
命令行工具模块

提供 clustools 聚类 CLI 命令。
"""

from clustools.cli.main import cli

__all__ = ["cli"]
