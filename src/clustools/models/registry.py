"""聚类注册表

维护元素列表和全部聚类（包括已被取代的聚类），负责分配聚类 ID。
聚类 ID 单调递增、不复用，且等于其在主列表中的下标。
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from clustools.models.cluster import Cluster
from clustools.models.node import Node

logger = structlog.get_logger()


class ClusterRegistry:
    """元素与聚类的注册表

    元素不持有聚类，只记录 cluster_id；通过注册表把 ID 映射回聚类对象。
    """

    def __init__(self, total_elements: int) -> None:
        """为每个元素创建一个单元素聚类

        Args:
            total_elements: 元素总数 N
        """
        self.nodes: list[Node] = []
        self.clusters: list[Cluster] = []

        for i in range(total_elements):
            node = Node(id=i, cluster_id=i)
            self.nodes.append(node)
            self.clusters.append(Cluster(i, [node]))

    @property
    def next_cluster_id(self) -> int:
        return len(self.clusters)

    def get(self, cluster_id: int) -> Cluster:
        return self.clusters[cluster_id]

    def cluster_of(self, node: Node) -> Cluster:
        """返回元素当前所属的聚类"""
        return self.clusters[node.cluster_id]

    def active_clusters(self) -> list[Cluster]:
        return [cluster for cluster in self.clusters if cluster.active]

    def spawn(self, members: Iterable[Node], max_distance: float = 0.0) -> Cluster:
        """用给定成员创建新聚类

        成员原来所属的聚类被标记为非活跃，成员的 cluster_id 指向新聚类。

        Args:
            members: 新聚类的成员
            max_distance: 初始直径

        Returns:
            新创建的聚类
        """
        members = list(members)
        cluster = Cluster(self.next_cluster_id, members, max_distance)

        for node in members:
            previous = self.clusters[node.cluster_id]
            if previous.active:
                previous.deactivate()
            node.cluster_id = cluster.id

        self.clusters.append(cluster)
        return cluster

    def merge(self, a: Cluster, b: Cluster, distance: float) -> Cluster:
        """合并两个聚类为一个新聚类

        Args:
            a: 第一个聚类
            b: 第二个聚类
            distance: 触发合并的链接距离，作为新聚类的初始直径

        Returns:
            包含 a 和 b 全部成员的新聚类
        """
        if a.id == b.id:
            raise ValueError(f"不能合并聚类自身: {a.id}")

        merged = self.spawn([*a.members, *b.members], max_distance=distance)
        logger.debug(
            "clusters_merged",
            cluster_a=a.id,
            cluster_b=b.id,
            merged=merged.id,
            size=len(merged),
            distance=distance,
        )
        return merged

    def assignment(self) -> list[int]:
        """每个元素当前的 cluster_id"""
        return [node.cluster_id for node in self.nodes]
