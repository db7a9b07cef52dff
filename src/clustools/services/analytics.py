"""聚类统计分析

对最终划分的活跃聚类计算报告用的统计量和轮廓系数。
"""

from __future__ import annotations

import numpy as np
import structlog

from clustools.config import ClusteringConfig
from clustools.models.cluster import Cluster
from clustools.models.report import ClusterSummary, PartitionReport

logger = structlog.get_logger()


def summarize_cluster(cluster: Cluster, matrix: np.ndarray) -> ClusterSummary:
    """计算单个聚类的统计量并生成摘要"""
    cluster.calc_statistics(matrix)
    return ClusterSummary(
        cluster_id=cluster.id,
        members=cluster.member_ids,
        centroid=cluster.centroid.id if cluster.centroid is not None else None,
        medoid=cluster.mean.id if cluster.mean is not None else None,
        radius=cluster.radius,
        diameter=cluster.max_distance,
        pairs=cluster.pairs,
        distance_sum=cluster.distance_sum,
        av_distance=cluster.av_distance,
    )


def average_intra_distance(clusters: list[Cluster], matrix: np.ndarray) -> float:
    """所有活跃聚类内成员对的平均距离

    Returns:
        距离和 / 成员对数，没有成员对时为 0
    """
    pairs = 0
    distance_sum = 0.0
    for cluster in clusters:
        cluster.calc_distance_stats(matrix)
        pairs += cluster.pairs
        distance_sum += cluster.distance_sum
    return distance_sum / pairs if pairs else 0.0


def silhouette_scores(clusters: list[Cluster], matrix: np.ndarray) -> dict[int, float]:
    """计算每个元素的轮廓系数

    对元素 i：
    - intra: i 到同聚类其他成员的平均距离
    - inter: 其他活跃聚类中，i 到该聚类成员平均距离的最小值
    - score = (inter - intra) / max(inter, intra)
    单元素聚类的元素得分为 0。

    Returns:
        元素 ID -> 轮廓系数
    """
    groups = [cluster.member_ids for cluster in clusters if cluster.members]
    scores: dict[int, float] = {}

    for index, ids in enumerate(groups):
        others = [other for j, other in enumerate(groups) if j != index]
        for element in ids:
            if len(ids) == 1 or not others:
                scores[element] = 0.0
                continue

            intra = float(matrix[element, ids].sum()) / (len(ids) - 1)
            inter = min(float(matrix[element, other].mean()) for other in others)
            largest = max(inter, intra)
            scores[element] = (inter - intra) / largest if largest > 0 else 0.0

    return scores


def silhouette(clusters: list[Cluster], matrix: np.ndarray) -> float:
    """所有元素轮廓系数的均值"""
    scores = silhouette_scores(clusters, matrix)
    if not scores:
        return 0.0
    return float(np.mean(list(scores.values())))


def build_report(
    config: ClusteringConfig,
    clusters: list[Cluster],
    matrix: np.ndarray,
) -> PartitionReport:
    """生成完整的划分报告

    k-medoid 中两个 medoid 距离为 0 时，后一个聚类可能没有成员，
    空聚类不出现在报告中。

    Args:
        config: 聚类配置
        clusters: 活跃聚类列表
        matrix: 原始归一化距离矩阵

    Returns:
        划分报告
    """
    empty = [cluster.id for cluster in clusters if not cluster.members]
    if empty:
        logger.warning("empty_clusters_skipped", cluster_ids=empty)
        clusters = [cluster for cluster in clusters if cluster.members]

    summaries = [summarize_cluster(cluster, matrix) for cluster in clusters]
    report = PartitionReport(
        policy=config.policy,
        measure_type=config.measure_type,
        cutoff=config.distance_cutoff,
        total_elements=matrix.shape[0],
        clusters=summaries,
        active_clusters=len(summaries),
        orphans=sum(1 for summary in summaries if summary.size == 1),
        average_intra_distance=average_intra_distance(clusters, matrix),
        silhouette=silhouette(clusters, matrix),
    )
    logger.info(
        "report_built",
        active_clusters=report.active_clusters,
        orphans=report.orphans,
        silhouette=round(report.silhouette, 4),
    )
    return report
