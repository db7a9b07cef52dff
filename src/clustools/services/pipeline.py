"""聚类流程

原始分数 -> 归一化矩阵 -> 聚类策略 -> 活跃聚类 -> 统计报告
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import structlog

from clustools.config import ClusteringConfig
from clustools.models.cluster import Cluster
from clustools.models.registry import ClusterRegistry
from clustools.models.report import PartitionReport
from clustools.services.analytics import build_report
from clustools.services.clustering.strategy import build_strategy
from clustools.services.input_reader import read_scores
from clustools.services.normalizer import normalize_scores

logger = structlog.get_logger()


@dataclass
class ClusteringRun:
    """一次聚类运行的结果

    Attributes:
        config: 使用的配置
        matrix: 归一化距离矩阵
        registry: 元素和全部聚类（包括已被取代的聚类）
        clusters: 活跃聚类
        report: 统计报告
    """

    config: ClusteringConfig
    matrix: np.ndarray
    registry: ClusterRegistry
    clusters: list[Cluster]
    report: PartitionReport


def run_clustering(
    raw_scores: Sequence[float] | np.ndarray,
    total_elements: int,
    config: ClusteringConfig,
) -> ClusteringRun:
    """对原始分数执行完整聚类流程

    Args:
        raw_scores: 长度为 N² 的行优先原始分数
        total_elements: 元素总数 N
        config: 聚类配置

    Returns:
        聚类运行结果

    Raises:
        MalformedInputError: 原始分数格式错误
        InvalidConfigurationError: 配置无效
        NonConvergenceError: k-medoid 未收敛
    """
    start = time.perf_counter()
    strategy = build_strategy(config)

    matrix = normalize_scores(raw_scores, total_elements, config.measure_type)
    registry = ClusterRegistry(total_elements)

    logger.info(
        "clustering_started",
        policy=config.policy.value,
        measure_type=config.measure_type.value,
        cutoff=config.distance_cutoff,
        total_elements=total_elements,
    )

    clusters = strategy.cluster(matrix, registry)
    report = build_report(config, clusters, matrix)

    logger.info(
        "clustering_run_finished",
        policy=config.policy.value,
        active_clusters=len(clusters),
        total_clusters=len(registry.clusters),
        elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return ClusteringRun(
        config=config,
        matrix=matrix,
        registry=registry,
        clusters=clusters,
        report=report,
    )


def run_from_file(input_path: str | Path, config: ClusteringConfig) -> ClusteringRun:
    """读取分数文件并执行聚类"""
    total_elements, raw_scores = read_scores(input_path)
    return run_clustering(raw_scores, total_elements, config)
