"""聚类模块

提供聚类策略协议和实现。
"""

from clustools.services.clustering.hierarchical import (
    Decision,
    HierarchicalCutoffStrategy,
    HierarchicalStrategy,
    StrictCutoffStrategy,
    UPGMAStrategy,
)
from clustools.services.clustering.kmedoid import KMedoidStrategy
from clustools.services.clustering.spicker import SpickerStrategy
from clustools.services.clustering.strategy import ClusteringStrategy, build_strategy

__all__ = [
    "ClusteringStrategy",
    "Decision",
    "HierarchicalCutoffStrategy",
    "HierarchicalStrategy",
    "KMedoidStrategy",
    "SpickerStrategy",
    "StrictCutoffStrategy",
    "UPGMAStrategy",
    "build_strategy",
]
