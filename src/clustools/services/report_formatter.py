"""聚类报告文本格式化

相似度输入时，距离类统计量转换回相似度 (1 - 距离) 再显示。
"""

from __future__ import annotations

from clustools.config import MeasureType
from clustools.models.report import ClusterSummary, PartitionReport


def _to_display(value: float, measure_type: MeasureType) -> float:
    if measure_type == MeasureType.SIMILARITY:
        return 1.0 - value
    return value


def format_cluster(summary: ClusterSummary, measure_type: MeasureType) -> list[str]:
    """格式化单个聚类

    Returns:
        两行文本：统计行和成员列表
    """
    if measure_type == MeasureType.SIMILARITY:
        spread = f"minSimilarity {1.0 - summary.diameter:.6f}, avSimilarity {1.0 - summary.av_distance:.6f}"
    else:
        spread = f"maxDistance {summary.diameter:.6f}, avDistance {summary.av_distance:.6f}"

    header = (
        f"Cluster {summary.cluster_id} : clustroid {summary.centroid}, medoid {summary.medoid}, "
        f"radius {_to_display(summary.radius, measure_type):.6f} members {summary.size}, {spread}"
    )
    return [header, "List of members:", " ".join(str(member) for member in summary.members)]


def format_report(report: PartitionReport) -> str:
    """格式化完整划分报告"""
    lines: list[str] = []
    for summary in report.clusters:
        lines.extend(format_cluster(summary, report.measure_type))

    lines.append(f"Total number of clusters: {report.active_clusters}")
    lines.append(f"Orphan clusters: {report.orphans}")
    label = "similarity" if report.measure_type == MeasureType.SIMILARITY else "distance"
    lines.append(
        f"Average intra-cluster {label}: "
        f"{_to_display(report.average_intra_distance, report.measure_type):.6f}"
    )
    lines.append(f"Silhouette: {report.silhouette:.6f}")
    return "\n".join(lines)
