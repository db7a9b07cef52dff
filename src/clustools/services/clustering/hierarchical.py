"""基于链接队列的层次聚类

所有链接按距离升序取出，每条链接由策略决定：
- MERGE: 合并两元素所在的聚类
- RECORD_DIAMETER: 两元素已在同一聚类，记录该链接距离为聚类直径
- SKIP: 丢弃该链接

由于链接按升序处理，同一聚类内最后处理的链接决定该聚类的直径。
被拒绝的链接不会重新入队。
"""

from __future__ import annotations

from enum import Enum

import numpy as np
import structlog

from clustools.models.cluster import Cluster
from clustools.models.link import Link, LinkQueue
from clustools.models.registry import ClusterRegistry

logger = structlog.get_logger()


class Decision(Enum):
    """链接处理决定"""

    MERGE = "merge"
    RECORD_DIAMETER = "record_diameter"
    SKIP = "skip"


class HierarchicalStrategy:
    """无阈值层次聚类

    处理所有链接，不同聚类的元素一律合并，最终得到包含全部元素的单个聚类。
    """

    name = "hierarchical"

    def decide(self, link: Link, a: Cluster, b: Cluster, matrix: np.ndarray) -> Decision:
        if a.id == b.id:
            return Decision.RECORD_DIAMETER
        return Decision.MERGE

    def cluster(self, matrix: np.ndarray, registry: ClusterRegistry) -> list[Cluster]:
        """按距离升序消费全部链接

        Args:
            matrix: N×N 归一化距离矩阵
            registry: 元素和聚类注册表

        Returns:
            活跃聚类列表
        """
        queue = LinkQueue.from_matrix(matrix, registry.nodes)
        logger.info("links_initialized", strategy=self.name, links=len(queue))

        merges = 0
        rejected = 0
        for link in queue.drain():
            a = registry.cluster_of(link.node_a)
            b = registry.cluster_of(link.node_b)
            decision = self.decide(link, a, b, matrix)

            if decision == Decision.MERGE:
                registry.merge(a, b, link.distance)
                merges += 1
            elif decision == Decision.RECORD_DIAMETER:
                a.set_max_distance(link.distance)
            elif a.id != b.id:
                rejected += 1

        active = registry.active_clusters()
        logger.info(
            "clustering_completed",
            strategy=self.name,
            merges=merges,
            rejected_links=rejected,
            active_clusters=len(active),
        )
        return active


class HierarchicalCutoffStrategy(HierarchicalStrategy):
    """单链接层次聚类

    只有距离小于阈值的链接可以触发合并；超过阈值的链接只用于记录直径。
    """

    name = "hierarchical_cutoff"

    def __init__(self, cutoff: float) -> None:
        """初始化单链接策略

        Args:
            cutoff: 距离阈值，链接距离必须严格小于它才能合并
        """
        self.cutoff = cutoff

    def accept(self, a: Cluster, b: Cluster, matrix: np.ndarray) -> bool:
        """两个不同聚类能否合并"""
        return True

    def decide(self, link: Link, a: Cluster, b: Cluster, matrix: np.ndarray) -> Decision:
        if a.id == b.id:
            return Decision.RECORD_DIAMETER
        if link.distance >= self.cutoff:
            return Decision.SKIP
        if self.accept(a, b, matrix):
            return Decision.MERGE
        return Decision.SKIP


class StrictCutoffStrategy(HierarchicalCutoffStrategy):
    """全链接层次聚类

    合并前检查两个聚类所有成员对的距离都小于阈值。
    """

    name = "strict_cutoff"

    def accept(self, a: Cluster, b: Cluster, matrix: np.ndarray) -> bool:
        cross = matrix[np.ix_(a.member_ids, b.member_ids)]
        return bool(np.all(cross < self.cutoff))


class UPGMAStrategy(HierarchicalCutoffStrategy):
    """平均链接 (UPGMA) 层次聚类

    合并前检查两个聚类成员对的平均距离小于阈值。
    """

    name = "upgma"

    def accept(self, a: Cluster, b: Cluster, matrix: np.ndarray) -> bool:
        cross = matrix[np.ix_(a.member_ids, b.member_ids)]
        return float(cross.mean()) < self.cutoff
