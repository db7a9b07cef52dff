"""聚类策略协议

定义聚类算法的统一接口和按配置构建策略的工厂。
"""

from __future__ import annotations

from typing import Protocol

import numpy as np

from clustools.config import ClusteringConfig, Policy
from clustools.exceptions import InvalidConfigurationError
from clustools.models.cluster import Cluster
from clustools.models.registry import ClusterRegistry


class ClusteringStrategy(Protocol):
    """聚类策略协议

    策略在注册表上就地执行聚类：创建新聚类、标记被取代的聚类为非活跃，
    并维护元素的 cluster_id。
    """

    def cluster(self, matrix: np.ndarray, registry: ClusterRegistry) -> list[Cluster]:
        """执行聚类

        Args:
            matrix: N×N 归一化距离矩阵，策略不得修改
            registry: 初始化后的元素和聚类注册表

        Returns:
            聚类结束后的活跃聚类列表
        """
        ...


def build_strategy(config: ClusteringConfig) -> ClusteringStrategy:
    """根据配置构建聚类策略

    Raises:
        InvalidConfigurationError: 未知的聚类策略
    """
    from clustools.services.clustering.hierarchical import (
        HierarchicalCutoffStrategy,
        HierarchicalStrategy,
        StrictCutoffStrategy,
        UPGMAStrategy,
    )
    from clustools.services.clustering.kmedoid import KMedoidStrategy
    from clustools.services.clustering.spicker import SpickerStrategy

    cutoff = config.distance_cutoff
    if config.policy == Policy.HIERARCHICAL:
        return HierarchicalStrategy()
    if config.policy == Policy.HIERARCHICAL_CUTOFF:
        return HierarchicalCutoffStrategy(cutoff)
    if config.policy == Policy.STRICT_CUTOFF:
        return StrictCutoffStrategy(cutoff)
    if config.policy == Policy.UPGMA:
        return UPGMAStrategy(cutoff)
    if config.policy == Policy.SPICKER:
        return SpickerStrategy(cutoff)
    if config.policy == Policy.KMEDOID:
        if config.k is None:
            raise InvalidConfigurationError("k-medoid 需要 k")
        return KMedoidStrategy(
            k=config.k,
            seed=config.seed,
            max_iterations=config.max_iterations,
        )
    raise InvalidConfigurationError(f"未知的聚类策略: {config.policy}")
