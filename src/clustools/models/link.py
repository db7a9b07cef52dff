"""链接数据模型

链接是两个元素之间的候选关系，按距离从小到大被取出。
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from clustools.models.node import Node


@dataclass(frozen=True, slots=True)
class Link:
    """两个元素之间的链接

    Attributes:
        node_a: 第一个元素
        node_b: 第二个元素
        distance: 两元素间的归一化距离
    """

    node_a: Node
    node_b: Node
    distance: float


class LinkQueue:
    """最小距离优先的链接队列

    距离相同的链接按插入顺序取出，保证结果可复现。
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Link]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, link: Link) -> None:
        heapq.heappush(self._heap, (link.distance, next(self._counter), link))

    def pop(self) -> Link:
        """取出距离最小的链接

        Raises:
            IndexError: 队列为空
        """
        return heapq.heappop(self._heap)[2]

    def drain(self) -> Iterator[Link]:
        """按距离升序依次取出所有链接"""
        while self._heap:
            yield self.pop()

    @classmethod
    def from_matrix(cls, matrix: np.ndarray, nodes: list[Node]) -> "LinkQueue":
        """为每个无序元素对 (i < j) 生成一条链接

        Args:
            matrix: N×N 归一化距离矩阵
            nodes: 元素列表，下标与矩阵行列对应

        Returns:
            包含 N(N-1)/2 条链接的队列
        """
        queue = cls()
        total = len(nodes)
        for i in range(total - 1):
            for j in range(i + 1, total):
                queue.push(Link(nodes[i], nodes[j], float(matrix[i, j])))
        return queue
