"""clustools - 基于成对距离矩阵的聚类工具

提供层次聚类（单链接/全链接）、UPGMA、SPICKER 密度聚类和 k-medoid 划分聚类，
以及聚类统计量和轮廓系数。
"""

from clustools.config import ClusteringConfig, MeasureType, Policy
from clustools.exceptions import (
    ClusteringError,
    InvalidConfigurationError,
    MalformedInputError,
    NonConvergenceError,
)
from clustools.services.pipeline import ClusteringRun, run_clustering

__version__ = "0.2.0"

__all__ = [
    "ClusteringConfig",
    "ClusteringError",
    "ClusteringRun",
    "InvalidConfigurationError",
    "MalformedInputError",
    "MeasureType",
    "NonConvergenceError",
    "Policy",
    "run_clustering",
]
