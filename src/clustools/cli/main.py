"""clustools CLI 工具

用法:
    clustools cluster -f scores.txt -s hierarchical_cutoff -d 0.5
    clustools cluster -f scores.txt -m similarity -s spicker -d 0.6
    clustools cluster -f scores.txt -s kmedoid --k 3 --seed 7 --json-only
"""

import logging
import sys
from pathlib import Path

import click
import structlog

from clustools import __version__
from clustools.cli.utils import echo_json, handle_clustering_errors
from clustools.config import ClusteringConfig, MeasureType, Policy
from clustools.services.pipeline import run_from_file
from clustools.services.report_formatter import format_report
from clustools.utils.logging import configure_logging, get_logger


def _disable_logging() -> None:
    """禁用所有日志输出,保证 stdout 只有 JSON"""
    structlog.configure(
        processors=[],
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    logging.basicConfig(level=logging.CRITICAL, stream=sys.stderr)


@click.group()
@click.version_option(version=__version__, prog_name="clustools")
def cli():
    """clustools - 基于成对距离矩阵的聚类工具"""
    pass


@cli.command(name="cluster")
@click.option(
    "--file",
    "-f",
    "input_file",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="分数文件，每行: elementX elementY score",
)
@click.option(
    "--policy",
    "-s",
    type=click.Choice([policy.value for policy in Policy]),
    default=None,
    help="聚类策略 (默认: spicker)",
)
@click.option(
    "--measure",
    "-m",
    type=click.Choice([measure.value for measure in MeasureType]),
    default=None,
    help="输入为距离或相似度 (默认: distance)",
)
@click.option(
    "--cutoff",
    "-d",
    type=float,
    default=None,
    help="聚类阈值；相似度输入时为相似度阈值 (默认: 0.5)",
)
@click.option("--k", "k", type=int, default=None, help="k-medoid 聚类数")
@click.option("--seed", type=int, default=None, help="k-medoid 随机种子")
@click.option("--max-iterations", type=int, default=None, help="k-medoid 最大迭代次数 (默认: 100)")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML 配置文件，命令行参数优先",
)
@click.option(
    "--json-only",
    "-j",
    is_flag=True,
    help="仅输出 JSON 格式的聚类报告",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="日志级别 (默认: WARNING)",
)
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="日志文件路径")
@handle_clustering_errors("聚类")
def cluster(
    input_file: Path,
    policy: str | None,
    measure: str | None,
    cutoff: float | None,
    k: int | None,
    seed: int | None,
    max_iterations: int | None,
    config: Path | None,
    json_only: bool,
    log_level: str,
    log_file: str | None,
):
    """对分数文件中的元素进行聚类

    示例:
        clustools cluster -f scores.txt
        clustools cluster -f scores.txt -s strict_cutoff -d 0.3
        clustools cluster -f scores.txt -c config/clustering.yaml --json-only
    """
    if json_only:
        _disable_logging()
    else:
        configure_logging(level=log_level, log_file=log_file, json_format=False)
    log = get_logger(__name__)

    overrides = {
        "policy": policy,
        "measure_type": measure,
        "cutoff": cutoff,
        "k": k,
        "seed": seed,
        "max_iterations": max_iterations,
    }
    if config:
        clustering_config = ClusteringConfig.load_from_yaml(config, overrides)
    else:
        clustering_config = ClusteringConfig.from_dict(
            {key: value for key, value in overrides.items() if value is not None}
        )
    log.debug("config_resolved", **clustering_config.model_dump(mode="json"))

    run = run_from_file(input_file, clustering_config)
    if json_only:
        echo_json(run.report.model_dump(mode="json"))
        return

    click.echo(format_report(run.report))


if __name__ == "__main__":
    cli()
