"""SPICKER 密度聚类测试"""

import numpy as np
import pytest
from clustools.models.registry import ClusterRegistry
from clustools.services.clustering.spicker import SpickerStrategy


def _run(cutoff: float, matrix: np.ndarray):
    registry = ClusterRegistry(matrix.shape[0])
    return SpickerStrategy(cutoff).cluster(matrix, registry), registry


class TestSpickerStrategy:
    """SpickerStrategy 测试"""

    def test_two_tight_pairs(self, two_pairs_matrix):
        """测试两组紧密元素对"""
        clusters, registry = _run(0.5, two_pairs_matrix)

        assert [cluster.member_ids for cluster in clusters] == [[0, 1], [2, 3]]
        assert [cluster.id for cluster in clusters] == [4, 5]
        assert all(cluster.max_distance == pytest.approx(0.1) for cluster in clusters)
        assert not any(registry.get(i).active for i in range(4))

    def test_densest_row_selected_first(self, chain_matrix):
        """测试先选择阈值内邻居最多的行，并列时取下标最小的行"""
        # 阈值 0.3: 元素 1、2、3 各有 3 个邻居，先选元素 1
        clusters, _ = _run(0.3, chain_matrix)

        assert [cluster.member_ids for cluster in clusters] == [[0, 1, 2], [3, 4]]

    def test_every_element_in_exactly_one_cluster(self, blobs_matrix):
        """测试每个元素恰好属于一个输出聚类"""
        clusters, registry = _run(0.2, blobs_matrix)

        members = [member for cluster in clusters for member in cluster.member_ids]
        assert sorted(members) == list(range(12))
        for node in registry.nodes:
            owner = registry.cluster_of(node)
            assert owner.active
            assert node.id in owner.member_ids

    def test_blobs_recovered(self, blobs_matrix):
        """测试三组元素被分为三个聚类"""
        clusters, _ = _run(0.2, blobs_matrix)

        assert sorted(sorted(cluster.member_ids) for cluster in clusters) == [
            [0, 1, 2, 3],
            [4, 5, 6, 7],
            [8, 9, 10, 11],
        ]

    def test_zero_cutoff_gives_singletons(self, chain_matrix):
        """测试阈值为 0 时每个元素单独成聚类"""
        clusters, _ = _run(0.0, chain_matrix)

        assert [cluster.member_ids for cluster in clusters] == [[0], [1], [2], [3], [4]]

    def test_matrix_is_not_modified(self, blobs_matrix):
        """测试原始矩阵不被修改"""
        original = blobs_matrix.copy()

        _run(0.2, blobs_matrix)

        np.testing.assert_array_equal(blobs_matrix, original)

    def test_diameter_from_original_matrix(self, blobs_matrix):
        """测试直径由原始矩阵按最终成员计算"""
        clusters, _ = _run(0.2, blobs_matrix)

        for cluster in clusters:
            ids = cluster.member_ids
            assert cluster.max_distance == pytest.approx(blobs_matrix[np.ix_(ids, ids)].max())

    def test_neighbor_counts_respect_eligibility(self, two_pairs_matrix):
        """测试邻居计数只统计可用的列"""
        strategy = SpickerStrategy(0.5)
        within = (two_pairs_matrix >= 0) & (two_pairs_matrix < 0.5)
        eligible = np.array([False, True, True, True])

        counts = strategy.neighbor_counts(within, eligible)

        np.testing.assert_array_equal(counts, [1, 1, 2, 2])
