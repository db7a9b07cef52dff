"""k-medoid 划分聚类

随机选取 k 个不同元素作为初始 medoid，然后交替执行：
1. 分配：每个元素归入距离最近的 medoid 所在聚类
2. 更新：每个聚类重新选择到其他成员距离和最小的成员为 medoid
直到没有 medoid 发生变化。
"""

from __future__ import annotations

import numpy as np
import structlog

from clustools.exceptions import InvalidConfigurationError, NonConvergenceError
from clustools.models.cluster import Cluster
from clustools.models.node import Node
from clustools.models.registry import ClusterRegistry

logger = structlog.get_logger()


class KMedoidStrategy:
    """k-medoid 划分聚类

    k 个聚类对象在迭代过程中就地更新成员，聚类 ID 不变。
    """

    name = "kmedoid"

    def __init__(self, k: int, seed: int | None = None, max_iterations: int = 100) -> None:
        """初始化 k-medoid 策略

        Args:
            k: 聚类数
            seed: 随机种子，None 表示每次运行结果可能不同
            max_iterations: 最大迭代次数，超过则抛出 NonConvergenceError
        """
        self.k = k
        self.seed = seed
        self.max_iterations = max_iterations
        self.roster: list[Cluster] = []
        self.iterations = 0

    def initial_medoids(self, total: int) -> list[int]:
        """均匀随机选取 k 个不同元素"""
        rng = np.random.default_rng(self.seed)
        return rng.choice(total, size=self.k, replace=False).tolist()

    def medoid_ids(self) -> list[int]:
        return [cluster.mean.id for cluster in self.roster]  # type: ignore[union-attr]

    def assign(self, matrix: np.ndarray, registry: ClusterRegistry) -> None:
        """把每个元素分配到最近 medoid 的聚类

        距离相同时取扫描顺序中第一个 medoid。
        """
        medoids = self.medoid_ids()
        closest = matrix[:, medoids].argmin(axis=1)

        members: list[list[Node]] = [[] for _ in self.roster]
        for node in registry.nodes:
            index = int(closest[node.id])
            members[index].append(node)
            node.cluster_id = self.roster[index].id

        for cluster, cluster_members in zip(self.roster, members, strict=True):
            cluster.set_members(cluster_members)

    def update(self, matrix: np.ndarray) -> bool:
        """重新计算每个聚类的 medoid

        Returns:
            是否有 medoid 发生变化
        """
        changed = False
        for cluster in self.roster:
            old = cluster.mean
            new = cluster.calc_mean(matrix)
            if old is not new:
                changed = True
        return changed

    def cluster(self, matrix: np.ndarray, registry: ClusterRegistry) -> list[Cluster]:
        """执行 k-medoid 聚类

        Args:
            matrix: N×N 归一化距离矩阵
            registry: 元素和聚类注册表

        Returns:
            k 个活跃聚类

        Raises:
            InvalidConfigurationError: k 大于元素数
            NonConvergenceError: 超过最大迭代次数仍未收敛
        """
        total = len(registry.nodes)
        if self.k > total:
            raise InvalidConfigurationError(f"k={self.k} 大于元素数 {total}")

        for cluster in registry.active_clusters():
            cluster.deactivate()

        self.roster = [registry.spawn([registry.nodes[i]]) for i in self.initial_medoids(total)]
        logger.debug("kmedoid_initialized", k=self.k, seed=self.seed, medoids=self.medoid_ids())

        self.assign(matrix, registry)
        for iteration in range(1, self.max_iterations + 1):
            self.iterations = iteration
            changed = self.update(matrix)
            self.assign(matrix, registry)
            logger.debug(
                "kmedoid_iteration",
                iteration=iteration,
                changed=changed,
                medoids=self.medoid_ids(),
            )
            if not changed:
                for cluster in self.roster:
                    cluster.calc_max_distance(matrix)
                logger.info(
                    "clustering_completed",
                    strategy=self.name,
                    iterations=iteration,
                    active_clusters=len(self.roster),
                )
                return registry.active_clusters()

        logger.warning(
            "kmedoid_not_converged",
            iterations=self.max_iterations,
            medoids=self.medoid_ids(),
        )
        raise NonConvergenceError(self.max_iterations, self.medoid_ids())
