"""聚类数据模型"""

from clustools.models.cluster import Cluster
from clustools.models.link import Link, LinkQueue
from clustools.models.node import Node
from clustools.models.registry import ClusterRegistry
from clustools.models.report import ClusterSummary, PartitionReport

__all__ = [
    "Cluster",
    "ClusterRegistry",
    "ClusterSummary",
    "Link",
    "LinkQueue",
    "Node",
    "PartitionReport",
]
