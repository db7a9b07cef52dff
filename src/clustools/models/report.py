"""聚类报告数据模型

提供给报告层的每个活跃聚类统计和整体划分质量。
"""

from pydantic import BaseModel, Field

from clustools.config import MeasureType, Policy


class ClusterSummary(BaseModel):
    """单个活跃聚类的统计"""

    cluster_id: int = Field(..., description="聚类 ID")
    members: list[int] = Field(default_factory=list, description="成员元素 ID 列表")
    centroid: int | None = Field(default=None, description="centroid (minimax) 元素 ID")
    medoid: int | None = Field(default=None, description="medoid (距离和最小) 元素 ID")
    radius: float = Field(default=0.0, description="centroid 到成员的最大距离")
    diameter: float = Field(default=0.0, description="成员间最大距离")
    pairs: int = Field(default=0, description="成员对数")
    distance_sum: float = Field(default=0.0, description="成员间距离和")
    av_distance: float = Field(default=0.0, description="成员间平均距离")

    @property
    def size(self) -> int:
        return len(self.members)


class PartitionReport(BaseModel):
    """完整划分的报告"""

    policy: Policy = Field(..., description="聚类策略")
    measure_type: MeasureType = Field(..., description="度量类型")
    cutoff: float = Field(..., description="距离约定下使用的阈值")
    total_elements: int = Field(..., description="元素总数")
    clusters: list[ClusterSummary] = Field(default_factory=list, description="活跃聚类列表")
    active_clusters: int = Field(default=0, description="活跃聚类数")
    orphans: int = Field(default=0, description="单元素聚类数")
    average_intra_distance: float = Field(default=0.0, description="聚类内平均距离")
    silhouette: float = Field(default=0.0, description="轮廓系数均值")
