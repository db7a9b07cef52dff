"""距离归一化

把可能不对称的 N×N 原始分数转换为对称的归一化距离矩阵：
- 双向均为 0 -> 0
- 仅一侧为 0 -> 两者算术平均
- 否则 -> 调和平均 2ab / (a + b)
- 对角线强制为 0
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import structlog

from clustools.config import MeasureType
from clustools.exceptions import MalformedInputError

logger = structlog.get_logger()


def normalize_scores(
    raw_scores: Sequence[float] | np.ndarray,
    total_elements: int,
    measure_type: MeasureType = MeasureType.DISTANCE,
) -> np.ndarray:
    """归一化原始分数

    Args:
        raw_scores: 长度为 N² 的行优先原始分数，raw[i*N+j] 为 i 到 j 的分数
        total_elements: 元素总数 N
        measure_type: 相似度输入会先反转为 1 - score

    Returns:
        N×N 对称归一化距离矩阵 (float64)

    Raises:
        MalformedInputError: 原始分数长度不是 N²、包含非有限值或负距离
    """
    raw = np.asarray(raw_scores, dtype=np.float64)
    if raw.size != total_elements * total_elements:
        raise MalformedInputError(
            f"原始分数数量 {raw.size} 与元素数 {total_elements} 不匹配 (需要 {total_elements ** 2})"
        )
    if not np.all(np.isfinite(raw)):
        raise MalformedInputError("原始分数包含非有限值")

    raw = raw.reshape(total_elements, total_elements)
    if measure_type == MeasureType.SIMILARITY:
        raw = 1.0 - raw
    if np.any(raw < 0):
        raise MalformedInputError("距离不能为负 (相似度输入需在 [0, 1] 范围内)")

    forward = raw
    backward = raw.T
    total = forward + backward
    product = forward * backward

    one_side_zero = (forward == 0) != (backward == 0)
    both_nonzero = (forward != 0) & (backward != 0)

    normalized = np.zeros_like(raw)
    # 仅一侧为 0 时调和平均退化为算术平均
    normalized[one_side_zero] = total[one_side_zero] / 2.0
    normalized[both_nonzero] = 2.0 * product[both_nonzero] / total[both_nonzero]
    np.fill_diagonal(normalized, 0.0)

    degenerate = int(np.count_nonzero(np.triu(one_side_zero, k=1)))
    if degenerate:
        logger.debug("degenerate_pairs_averaged", count=degenerate)

    logger.debug("scores_normalized", total_elements=total_elements, measure_type=measure_type.value)
    return normalized
