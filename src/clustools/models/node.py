"""元素数据模型"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Node:
    """参与聚类的单个元素

    Attributes:
        id: 元素标识 (0..N-1)，创建后不变
        cluster_id: 当前所属聚类的 ID，由改变聚类成员关系的操作维护
    """

    id: int
    cluster_id: int
