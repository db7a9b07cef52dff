"""链接和链接队列测试"""

import numpy as np
import pytest
from clustools.models.link import Link, LinkQueue
from clustools.models.node import Node


class TestLink:
    """Link 数据类测试"""

    def test_link_is_immutable(self):
        """测试链接创建后不可修改"""
        link = Link(Node(0, 0), Node(1, 1), 0.3)

        with pytest.raises(AttributeError):
            link.distance = 0.5  # type: ignore[misc]


class TestLinkQueue:
    """LinkQueue 测试"""

    def test_pops_smallest_distance_first(self):
        """测试按距离升序取出，与插入顺序无关"""
        nodes = [Node(i, i) for i in range(4)]
        queue = LinkQueue()
        for distance in [0.7, 0.1, 0.5, 0.3]:
            queue.push(Link(nodes[0], nodes[1], distance))

        assert [link.distance for link in queue.drain()] == [0.1, 0.3, 0.5, 0.7]
        assert len(queue) == 0
        assert not queue

    def test_ties_keep_insertion_order(self):
        """测试距离相同时按插入顺序取出"""
        nodes = [Node(i, i) for i in range(4)]
        queue = LinkQueue()
        first = Link(nodes[2], nodes[3], 0.2)
        second = Link(nodes[0], nodes[1], 0.2)
        queue.push(first)
        queue.push(second)

        assert queue.pop() is first
        assert queue.pop() is second

    def test_pop_empty_queue_raises(self):
        """测试空队列取出抛出 IndexError"""
        with pytest.raises(IndexError):
            LinkQueue().pop()

    def test_from_matrix_creates_one_link_per_unordered_pair(self, chain_matrix):
        """测试每个无序元素对生成一条链接"""
        nodes = [Node(i, i) for i in range(5)]

        queue = LinkQueue.from_matrix(chain_matrix, nodes)

        assert len(queue) == 10
        links = list(queue.drain())
        pairs = {(link.node_a.id, link.node_b.id) for link in links}
        assert len(pairs) == 10
        assert all(a < b for a, b in pairs)
        for link in links:
            assert link.distance == pytest.approx(chain_matrix[link.node_a.id, link.node_b.id])

    def test_from_matrix_single_element_has_no_links(self):
        """测试单个元素没有链接"""
        queue = LinkQueue.from_matrix(np.zeros((1, 1)), [Node(0, 0)])

        assert len(queue) == 0
