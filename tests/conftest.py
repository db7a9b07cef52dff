"""Pytest 全局配置和 fixtures"""

import numpy as np
import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """每个测试后恢复 structlog 默认配置，避免 CLI 测试残留的输出流"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def two_pairs_raw() -> list[float]:
    """两组紧密元素对: d(0,1)=d(2,3)=0.1，跨组距离 0.9"""
    matrix = np.array(
        [
            [0.0, 0.1, 0.9, 0.9],
            [0.1, 0.0, 0.9, 0.9],
            [0.9, 0.9, 0.0, 0.1],
            [0.9, 0.9, 0.1, 0.0],
        ]
    )
    return matrix.flatten().tolist()


@pytest.fixture
def two_pairs_matrix(two_pairs_raw) -> np.ndarray:
    """两组紧密元素对的归一化距离矩阵"""
    return np.array(two_pairs_raw).reshape(4, 4)


@pytest.fixture
def chain_matrix() -> np.ndarray:
    """5 个元素排成一条链，相邻距离 0.2，其余按位置差线性增长"""
    positions = np.arange(5, dtype=np.float64)
    return np.abs(positions[:, None] - positions[None, :]) * 0.2


@pytest.fixture
def blobs_matrix() -> np.ndarray:
    """三组各 4 个元素，组内距离较小，组间距离较大"""
    rng = np.random.default_rng(11)
    centers = np.array([[0.0, 0.0], [10.0, 0.0], [0.0, 10.0]])
    points = np.concatenate([center + rng.normal(scale=0.3, size=(4, 2)) for center in centers])
    distances = np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)
    return distances / distances.max()


@pytest.fixture
def score_file_writer():
    """返回把矩阵写成 elementX elementY score 格式分数文件的函数"""

    def write(path, matrix: np.ndarray):
        total = matrix.shape[0]
        lines = [f"{i}\t{j}\t{matrix[i, j]:.6f}" for i in range(total) for j in range(total)]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return write
