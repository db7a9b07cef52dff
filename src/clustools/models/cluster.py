"""聚类实体

聚类持有成员元素列表以及按需计算的统计量：
- centroid: 到其他成员最大距离最小的成员 (minimax)
- mean: 到其他成员距离之和最小的成员 (medoid)
- radius: centroid 到任一成员的最大距离
- max_distance: 成员间最大距离 (直径)
"""

from __future__ import annotations

import numpy as np

from clustools.models.node import Node


class Cluster:
    """聚类

    成员在创建后不变，只有两种修改：
    - set_max_distance: 合并引擎按距离升序扫描链接时记录直径
    - set_members: k-medoid 迭代中替换成员列表
    """

    def __init__(self, id: int, members: list[Node], max_distance: float = 0.0) -> None:
        self.id = id
        self.members = list(members)
        self.max_distance = max_distance
        self.active = True

        self.centroid: Node | None = None
        self.radius = 0.0
        self.mean: Node | None = members[0] if members else None

        self.pairs = 0
        self.distance_sum = 0.0
        self.av_distance = 0.0

    def __repr__(self) -> str:
        return (
            f"Cluster(id={self.id}, members={self.member_ids}, "
            f"max_distance={self.max_distance:.4f}, active={self.active})"
        )

    def __len__(self) -> int:
        return len(self.members)

    @property
    def member_ids(self) -> list[int]:
        return [node.id for node in self.members]

    @property
    def is_singleton(self) -> bool:
        return len(self.members) == 1

    def set_max_distance(self, max_distance: float) -> None:
        self.max_distance = max_distance

    def set_members(self, members: list[Node]) -> None:
        self.members = list(members)

    def deactivate(self) -> None:
        """标记为已被新聚类取代"""
        self.active = False

    def _submatrix(self, matrix: np.ndarray) -> np.ndarray:
        ids = self.member_ids
        return matrix[np.ix_(ids, ids)]

    def calc_centroid(self, matrix: np.ndarray) -> Node | None:
        """计算 centroid 和 radius

        centroid 为行最大距离最小的成员，距离相同时保留最先找到的成员。

        Args:
            matrix: 归一化距离矩阵

        Returns:
            centroid 元素，空聚类返回 None
        """
        if not self.members:
            self.centroid = None
            self.radius = 0.0
            return None

        row_max = self._submatrix(matrix).max(axis=1)
        best = int(np.argmin(row_max))
        self.centroid = self.members[best]
        self.radius = float(row_max[best])
        return self.centroid

    def calc_mean(self, matrix: np.ndarray) -> Node | None:
        """计算 mean (medoid)

        mean 为到其他成员距离之和最小的成员，距离相同时保留最先找到的成员。
        空聚类保持原有 mean 不变。
        """
        if not self.members:
            return self.mean

        row_sum = self._submatrix(matrix).sum(axis=1)
        self.mean = self.members[int(np.argmin(row_sum))]
        return self.mean

    def calc_max_distance(self, matrix: np.ndarray) -> float:
        """全量扫描成员对，计算直径"""
        if self.members:
            self.max_distance = float(self._submatrix(matrix).max())
        else:
            self.max_distance = 0.0
        return self.max_distance

    def calc_distance_stats(self, matrix: np.ndarray) -> float:
        """计算成员对数、距离和与平均距离

        Returns:
            平均成员间距离，少于两个成员时为 0
        """
        n = len(self.members)
        self.pairs = n * (n - 1) // 2
        if self.pairs == 0:
            self.distance_sum = 0.0
            self.av_distance = 0.0
            return self.av_distance

        sub = self._submatrix(matrix)
        self.distance_sum = float(sub[np.triu_indices(n, k=1)].sum())
        self.av_distance = self.distance_sum / self.pairs
        return self.av_distance

    def calc_statistics(self, matrix: np.ndarray) -> None:
        """计算所有报告用的统计量"""
        self.calc_centroid(matrix)
        self.calc_mean(matrix)
        self.calc_distance_stats(matrix)
