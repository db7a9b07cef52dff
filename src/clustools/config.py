"""聚类配置加载模块"""

from enum import Enum
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, ValidationError, model_validator

from clustools.exceptions import InvalidConfigurationError


class Policy(str, Enum):
    """聚类策略枚举"""

    HIERARCHICAL = "hierarchical"  # 无阈值层次聚类，合并到只剩一个聚类
    HIERARCHICAL_CUTOFF = "hierarchical_cutoff"  # 单链接，带阈值
    STRICT_CUTOFF = "strict_cutoff"  # 全链接，带阈值
    UPGMA = "upgma"  # 平均链接，带阈值
    SPICKER = "spicker"  # 密度贪心聚类
    KMEDOID = "kmedoid"  # 划分聚类


class MeasureType(str, Enum):
    """输入分数的度量类型"""

    DISTANCE = "distance"
    SIMILARITY = "similarity"


# 使用链接队列的策略
LINK_POLICIES = frozenset(
    {Policy.HIERARCHICAL, Policy.HIERARCHICAL_CUTOFF, Policy.STRICT_CUTOFF, Policy.UPGMA}
)


class ClusteringConfig(BaseModel):
    """聚类配置"""

    policy: Policy = Field(default=Policy.SPICKER, description="聚类策略")
    measure_type: MeasureType = Field(default=MeasureType.DISTANCE, description="度量类型")
    cutoff: float = Field(default=0.5, ge=0, description="距离阈值 (k-medoid 时可作为 k)")
    k: int | None = Field(default=None, ge=1, description="k-medoid 聚类数")
    seed: int | None = Field(default=None, description="k-medoid 随机种子")
    max_iterations: int = Field(default=100, ge=1, le=100000, description="k-medoid 最大迭代次数")

    model_config = {"extra": "ignore"}

    @model_validator(mode="after")
    def _check_ranges(self) -> "ClusteringConfig":
        if self.policy == Policy.KMEDOID:
            if self.k is None:
                # 单个数值参数在 k-medoid 策略下表示 k
                if self.cutoff < 1:
                    raise ValueError("k-medoid 需要 k >= 1")
                self.k = int(self.cutoff)
        elif self.measure_type == MeasureType.SIMILARITY and self.cutoff > 1:
            raise ValueError(f"相似度阈值必须在 [0, 1] 范围内: {self.cutoff}")
        return self

    @property
    def distance_cutoff(self) -> float:
        """转换到距离约定下的阈值

        相似度输入在读取时已被反转为 1 - score，阈值同样需要反转。
        """
        if self.measure_type == MeasureType.SIMILARITY and self.policy != Policy.KMEDOID:
            return 1.0 - self.cutoff
        return self.cutoff

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClusteringConfig":
        """从字典创建配置，校验失败时抛出 InvalidConfigurationError"""
        try:
            return cls(**data)
        except ValidationError as e:
            raise InvalidConfigurationError(f"无效的聚类配置: {e}") from e

    @classmethod
    def load_from_yaml(
        cls, config_path: str | Path, overrides: dict[str, Any] | None = None
    ) -> "ClusteringConfig":
        """从 YAML 文件加载配置

        Args:
            config_path: YAML 配置文件路径
            overrides: 覆盖文件中的值（值为 None 的键被忽略）

        Returns:
            聚类配置
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data: dict[str, Any] = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(f"无效的 YAML 格式: {e}") from e

        if not isinstance(config_data, dict):
            raise InvalidConfigurationError(f"配置文件顶层必须是映射: {config_path}")

        # 聚类配置可以放在 clustering 段下
        config_data = config_data.get("clustering", config_data)

        if overrides:
            config_data.update({key: value for key, value in overrides.items() if value is not None})

        return cls.from_dict(config_data)
