"""SPICKER 密度聚类

(Yang Z., Skolnick J., J Comput Chem. 2004;25(6):865-71)

迭代地找到阈值内邻居最多的行，把该行阈值内的所有元素组成一个聚类，
然后将这些元素从后续计算中剔除，直到所有元素都被分配。
"""

from __future__ import annotations

import numpy as np
import structlog

from clustools.models.cluster import Cluster
from clustools.models.registry import ClusterRegistry

logger = structlog.get_logger()


class SpickerStrategy:
    """SPICKER 风格的贪心密度聚类

    剔除元素通过列的可用性掩码表示，原始矩阵保持不变，用于之后的统计。
    """

    name = "spicker"

    def __init__(self, cutoff: float) -> None:
        """初始化 SPICKER 策略

        Args:
            cutoff: 邻居距离阈值，距离严格小于阈值才算邻居
        """
        self.cutoff = cutoff

    def neighbor_counts(self, within: np.ndarray, eligible: np.ndarray) -> np.ndarray:
        """每一行在可用列中的邻居数"""
        return (within & eligible[np.newaxis, :]).sum(axis=1)

    def cluster(self, matrix: np.ndarray, registry: ClusterRegistry) -> list[Cluster]:
        """执行 SPICKER 聚类

        Args:
            matrix: N×N 归一化距离矩阵
            registry: 元素和聚类注册表

        Returns:
            活跃聚类列表
        """
        total = matrix.shape[0]
        within = (matrix >= 0) & (matrix < self.cutoff)
        eligible = np.ones(total, dtype=bool)
        formed: list[Cluster] = []

        while eligible.any():
            counts = self.neighbor_counts(within, eligible)
            # argmax 返回第一个最大值，即下标最小的行
            max_row = int(np.argmax(counts))

            if counts[max_row] == 0:
                # 阈值为 0 时没有邻居，剩余元素逐个成为单元素聚类
                member_ids = [int(np.flatnonzero(eligible)[0])]
            else:
                member_ids = np.flatnonzero(within[max_row] & eligible).tolist()

            eligible[member_ids] = False
            cluster = registry.spawn(registry.nodes[i] for i in member_ids)
            cluster.calc_max_distance(matrix)
            formed.append(cluster)

            logger.debug(
                "spicker_cluster_formed",
                cluster_id=cluster.id,
                center=max_row,
                size=len(cluster),
                remaining=int(eligible.sum()),
            )

        logger.info("clustering_completed", strategy=self.name, active_clusters=len(formed))
        return registry.active_clusters()
