"""聚类异常定义

定义聚类流程中的异常类型，区分输入错误、配置错误和收敛失败。
"""

from __future__ import annotations


class ClusteringError(Exception):
    """聚类基础异常"""

    pass


class MalformedInputError(ClusteringError):
    """输入数据格式错误

    包括：
    - 分数记录无法解析为数字
    - 记录字段数不足
    - 记录数不是完全平方数
    - 原始分数数组长度与元素数不匹配
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"第 {line_number} 行: {message}"
        super().__init__(message)


class InvalidConfigurationError(ClusteringError, ValueError):
    """配置错误

    在任何聚类工作开始之前被拒绝的配置，包括：
    - 未知的聚类策略
    - 阈值或度量类型超出范围
    - k 值无效
    """

    pass


class NonConvergenceError(ClusteringError):
    """k-medoid 迭代未收敛

    超过最大迭代次数仍有 medoid 发生变化。
    """

    def __init__(self, iterations: int, medoids: list[int]) -> None:
        self.iterations = iterations
        self.medoids = medoids
        super().__init__(f"k-medoid 在 {iterations} 次迭代后仍未收敛 (当前 medoids: {medoids})")
