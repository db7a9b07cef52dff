"""CLI 公共工具"""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import click
import structlog

from clustools.exceptions import ClusteringError

logger = structlog.get_logger()

F = TypeVar("F", bound=Callable[..., Any])


def handle_clustering_errors(operation_name: str) -> Callable[[F], F]:
    """统一错误处理装饰器

    把输入、配置和收敛错误转换为红色错误信息和退出码 1。

    Args:
        operation_name: 操作名称，用于日志记录
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (ClusteringError, FileNotFoundError) as e:
                click.secho(f"❌ {operation_name}失败: {e}", fg="red", err=True)
                logger.error(f"{operation_name}_failed", error=str(e), error_type=type(e).__name__)
                raise SystemExit(1) from e

        return wrapper  # type: ignore[return-value]

    return decorator


def echo_json(data: object, *, indent: int = 2) -> None:
    click.echo(json.dumps(data, indent=indent, ensure_ascii=False))
