"""分数文件读取

文件每行一条记录: ``elementX elementY score``，字段之间以任意数量的
制表符、空格或 ``+`` 分隔。记录按行优先顺序列出所有有序元素对（包括自身对），
只使用第三个字段。
"""

from __future__ import annotations

import math
import re
from pathlib import Path

import structlog

from clustools.exceptions import MalformedInputError

logger = structlog.get_logger()

_FIELD_SEPARATOR = re.compile(r"[\t+ ]+")


def parse_score_line(line: str, line_number: int) -> float:
    """解析单行记录中的分数

    Raises:
        MalformedInputError: 字段不足或分数不是有限数字
    """
    fields = [field for field in _FIELD_SEPARATOR.split(line.strip()) if field]
    if len(fields) < 3:
        raise MalformedInputError(f"需要 3 个字段，实际 {len(fields)} 个: {line.strip()!r}", line_number)

    try:
        score = float(fields[2])
    except ValueError as e:
        raise MalformedInputError(f"分数不是数字: {fields[2]!r}", line_number) from e

    if not math.isfinite(score):
        raise MalformedInputError(f"分数不是有限值: {fields[2]!r}", line_number)
    return score


def element_count(record_count: int) -> int:
    """根据记录数推算元素数

    Raises:
        MalformedInputError: 记录数不是完全平方数
    """
    total = math.isqrt(record_count)
    if total * total != record_count or total == 0:
        raise MalformedInputError(f"记录数 {record_count} 不是正的完全平方数")
    return total


def read_scores(input_path: str | Path) -> tuple[int, list[float]]:
    """读取分数文件

    Args:
        input_path: 分数文件路径

    Returns:
        (元素数 N, 长度为 N² 的原始分数列表)

    Raises:
        FileNotFoundError: 文件不存在
        MalformedInputError: 文件内容格式错误
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"分数文件不存在: {input_path}")

    raw_scores: list[float] = []
    with open(input_path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            raw_scores.append(parse_score_line(line, line_number))

    total_elements = element_count(len(raw_scores))
    logger.info(
        "scores_loaded",
        source=str(input_path),
        records=len(raw_scores),
        total_elements=total_elements,
    )
    return total_elements, raw_scores
